"""assetmanifest CLI — Typer-based command-line interface.

Provides the ``assetmanifest`` command with subcommands for generating a
manifest from build stats files and inspecting an existing manifest.

All output uses Rich for formatted terminal display.
"""
