# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

from .cli import main

main()
