"""
Run with: python -m admissioncurves
"""
import sys

from admissioncurves.main import main

if __name__ == "__main__":
    sys.exit(main())
