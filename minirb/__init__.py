"""minirb: a tree-walk interpreter for a small Ruby-flavored language.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
