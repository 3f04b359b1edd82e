"""Discord event handlers wired up in ``ops_bridge.clients.disc``."""
