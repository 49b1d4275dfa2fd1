"""
checkpwn - check accounts and passwords against Have I Been Pwned.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.5.0"
