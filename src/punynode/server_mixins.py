"""
Lifecycle mixin for PunycodeMCPServer: bind address, signals, start and stop.
"""

import asyncio
import signal
import sys
from typing import Any

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


def _shutdown_signals() -> tuple[signal.Signals, ...]:
    if sys.platform == "win32":
        return (signal.SIGINT, signal.SIGBREAK)
    return (signal.SIGINT, signal.SIGTERM)


class ServerLifecycleMixin:
    """Runs the FastMCP instance over HTTP and stops it on SIGINT/SIGTERM.

    Expects ``server`` (FastMCP), ``config`` and ``logger`` on the host class.
    """

    server: Any
    config: dict[str, Any]
    logger: Any

    def bind_address(self, host: str | None = None, port: int | None = None) -> tuple[str, int]:
        """Resolve the listen address from arguments, then ``server`` config, then defaults."""
        server_cfg = self.config.get("server") or {}
        return (
            host or server_cfg.get("host", DEFAULT_HOST),
            port or int(server_cfg.get("port", DEFAULT_PORT)),
        )

    def setup_signal_handlers(self) -> None:
        """Stop the server when a shutdown signal arrives."""
        loop = asyncio.get_running_loop()
        for sig in _shutdown_signals():
            try:
                loop.add_signal_handler(
                    sig, lambda s=sig: asyncio.create_task(self._signal_handler(s))
                )
            except NotImplementedError:
                # Windows event loops have no add_signal_handler
                signal.signal(
                    sig, lambda s, f: loop.call_soon_threadsafe(
                        asyncio.create_task, self._signal_handler(s)
                    )
                )

    async def _signal_handler(self, sig: int) -> None:
        self.logger.info("Received shutdown signal %s", signal.Signals(sig).name)
        await self.stop()

    async def start(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the conversion tools over the HTTP transport.

        Args:
            host: Interface to bind, overriding ``server.host``.
            port: Port to listen on, overriding ``server.port``.

        Raises:
            OSError: If the address cannot be bound.
            RuntimeError: If the transport fails to start.
        """
        host, port = self.bind_address(host, port)
        self.setup_signal_handlers()
        self.logger.info("Starting Punycode MCP Server on %s:%d", host, port)
        try:
            await self.server.run_async(
                transport="http", host=host, port=port, log_level="DEBUG"
            )
        except (OSError, RuntimeError) as e:
            self.logger.error("Error starting server on %s:%d: %s", host, port, e)
            await self.stop()
            raise

    async def stop(self) -> None:
        """Remove the signal handlers installed by start()."""
        loop = asyncio.get_running_loop()
        for sig in _shutdown_signals():
            try:
                loop.remove_signal_handler(sig)
            except NotImplementedError:
                signal.signal(
                    sig,
                    signal.default_int_handler if sig == signal.SIGINT else signal.SIG_DFL,
                )
        self.logger.info("Punycode MCP Server stopped")
