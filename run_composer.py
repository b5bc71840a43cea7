"""
run_composer.py — CLI Entry Point

This script serves as the command-line entry point for the atlas
composer. It forwards execution to the CLI logic defined in
`src/atlas_composer/cli.py`.

Usage:
    python run_composer.py tile1.png tile2.png [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_composer.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import atlas_composer.cli as ac_cli

if __name__ == "__main__":
    sys.exit(ac_cli.main())
