"""
Solana wallet skill: balance queries, transfers, keys and network selection over MCP.
"""
