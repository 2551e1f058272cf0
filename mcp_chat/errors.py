class McpChatError(Exception):
    pass


class ConfigurationError(McpChatError):
    """Missing credential or malformed setting; fatal before startup."""


class ServerConnectionError(McpChatError, ConnectionError):
    """Unsupported server script, failed spawn or failed handshake."""


class ToolInvocationError(McpChatError):
    def __init__(self, tool: str, message: str):
        super().__init__(f"{tool}: {message}")
        self.tool = tool
        self.message = message


class TransportError(McpChatError):
    """The stdio channel to the tool server is gone."""
