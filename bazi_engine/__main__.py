#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""python -m bazi_engine"""

import sys

from .cli import main

sys.exit(main())
