"""
Version information for holdem-rules.
"""

VERSION = "1.0.0"
BUILD_DATE = "2026-10-17"


def get_version_info():
    """Get formatted version information"""
    return {
        'version': VERSION,
        'build_date': BUILD_DATE,
    }
