"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Bright Horizons site.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .home_page import HomePage
from .search_results_page import SearchResultsPage

__all__ = [
    "HomePage",
    "SearchResultsPage",
]
