"""
Solana RPC and key helpers.
"""
