# Copyright (c) 2026 Pixgrid
# SPDX-License-Identifier: MIT

from pixgrid.cli import main

raise SystemExit(main())
