# SPDX-License-Identifier: Apache-2.0
"""Coordinator service for multi-party FHE key ceremonies."""

__version__ = "0.1.0"
