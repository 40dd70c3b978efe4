#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
rkctl main module entry point.
Enables running the launcher as a module: python -m rkctl
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
