"""
News domain package.

Holds the news and join-row repositories together with the services that keep
the news aggregate in sync with its flat transfer representation.
"""
