"""Services Layer — write workflows that combine core rules with the entity store.

Invariants:
    - ledger.py owns loan origination, status changes and repayment posting
    - membership.py owns credential hashing, login and token resolution
"""
