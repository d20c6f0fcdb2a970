"""`wowapi` command line (Typer + Rich)."""
