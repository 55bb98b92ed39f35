"""
Wallet context state.
"""
