"""
PyInstaller entry point stub for cellfit.

This stub script allows PyInstaller to properly bundle the cellfit package
while preserving its relative imports.
"""

if __name__ == "__main__":
    from cellfit.main import main

    main()
