"""Allow running kuota-calc with ``python -m kuotacalc``."""

from kuotacalc.cli import main_cli

if __name__ == "__main__":
    main_cli()
