# =====================================================================
# File: vexargs_pkg/__main__.py
# Entrypoint for the vexargs inspector (python -m vexargs_pkg)
# =====================================================================
from .core.app import main

if __name__ == "__main__":
    raise SystemExit(main())
