"""Token storage for Fitbit API access.

The OAuth authorization flow itself happens outside this package; this
module only loads and saves the resulting tokens.
"""

import json
from typing import Optional


class FitbitAuth:
    """Holds the OAuth 2.0 tokens used to authorize API requests."""

    def __init__(self, access_token: Optional[str] = None):
        """Initialize FitbitAuth.

        Args:
            access_token: Bearer token, if already known.
        """
        self.access_token: Optional[str] = access_token
        self.refresh_token: Optional[str] = None
        self.token_type: Optional[str] = None
        self.expires_in: Optional[int] = None

    @classmethod
    def from_token_file(cls, filepath: str) -> 'FitbitAuth':
        """Create a FitbitAuth with tokens loaded from filepath."""
        auth = cls()
        auth.load_tokens(filepath)
        return auth

    def save_tokens(self, filepath: str) -> None:
        """Save tokens to a file.

        Args:
            filepath: Path to save tokens to.
        """
        token_data = {
            'access_token': self.access_token,
            'refresh_token': self.refresh_token,
            'token_type': self.token_type,
            'expires_in': self.expires_in,
        }

        with open(filepath, 'w') as f:
            json.dump(token_data, f, indent=2)

    def load_tokens(self, filepath: str) -> None:
        """Load tokens from a file.

        Args:
            filepath: Path to load tokens from.
        """
        with open(filepath, 'r') as f:
            token_data = json.load(f)

        self.access_token = token_data.get('access_token')
        self.refresh_token = token_data.get('refresh_token')
        self.token_type = token_data.get('token_type')
        self.expires_in = token_data.get('expires_in')
