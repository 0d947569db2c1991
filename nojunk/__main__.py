"""Allow running as `python -m nojunk`."""

from .main import main

main()
