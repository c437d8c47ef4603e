"""Plugin system — pluggy hooks fired after transfers and messages are normalized."""
