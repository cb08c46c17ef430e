# SPDX-License-Identifier: Apache-2.0
"""Session coordination services."""
