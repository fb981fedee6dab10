"""Print a long-lived bearer token for a username (e.g. for scripts).

Usage:
    python create_token.py alice [days]
"""
import sys

from task_manager_api.app.core.security import create_access_token

if len(sys.argv) < 2:
    sys.exit("usage: python create_token.py USERNAME [DAYS]")
days = int(sys.argv[2]) if len(sys.argv) > 2 else 365
print(create_access_token(sys.argv[1], expires_delta=days * 24 * 60 * 60))
