# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""mediaindex - Render a media directory as an HTML gallery."""

from mediaindex.__about__ import __version__

__all__ = ["__version__"]
