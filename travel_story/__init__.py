"""Travel Story API: accounts, bearer-token authentication and travel captions."""

__version__ = "0.1.0"
