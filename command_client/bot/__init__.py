"""
Discord client, configuration and keep-alive server.
"""
