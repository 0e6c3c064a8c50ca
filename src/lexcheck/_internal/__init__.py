# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Internal helpers for lexcheck. Not part of the public API."""
