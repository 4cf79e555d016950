"""Manifest aggregation core: path resolution, collection, state, pipeline, emission."""
