"""
Auction ledger: create auctions, place bids, close or cancel auctions.

All ledger state is kept in an external key-value :class:`Store` and the acting party is
resolved through a :class:`CallerIdentity` for each request.
"""
