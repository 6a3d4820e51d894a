"""Command-line entry points. Import fort_archive.cli.main for the dispatcher."""
