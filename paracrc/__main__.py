# SPDX-License-Identifier: MIT-0
# SPDX-FileCopyrightText:  2023 Istvan Pasztor
import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
