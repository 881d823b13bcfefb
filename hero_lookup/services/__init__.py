"""Services - imperative shell around the hero store.

Invariants:
    - Every store call goes through a service function (error translation + logging)
"""
