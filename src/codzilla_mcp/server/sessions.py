"""Session-multiplexing Streamable HTTP endpoint.

One HTTP path serves every client. A POST carrying an ``initialize``
request and no session header starts a new session with its own transport
and MCP server loop; later requests name their session in the
``mcp-session-id`` header and are handed to that session's transport.

Session lifecycle: initializing -> active -> closed. A closed session id is
retired and never accepted again.
"""

from __future__ import annotations

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Literal
from uuid import uuid4

import anyio
from anyio.abc import TaskGroup, TaskStatus
from mcp.server.streamable_http import (
    MCP_SESSION_ID_HEADER,
    StreamableHTTPServerTransport,
)
from mcp.server.transport_security import TransportSecuritySettings
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.types import Message, Receive, Scope, Send

from codzilla_mcp.logging_config import get_logger
from codzilla_mcp.server.protocol import (
    INVALID_SESSION_TEXT,
    UnsupportedRequest,
    bad_session_error,
    classify_message,
    decode_body,
    is_initialize_request,
    method_not_found,
)

if TYPE_CHECKING:
    from mcp.server.lowlevel import Server

logger = get_logger("sessions")

SessionState = Literal["initializing", "active", "closed"]


class SessionError(RuntimeError):
    """Raised when the session store would be left inconsistent."""


@dataclass
class Session:
    """A client session bound to one transport."""

    id: str
    transport: StreamableHTTPServerTransport
    created_at: float = field(default_factory=time.time)
    state: SessionState = "initializing"
    closed_at: float | None = None

    @property
    def is_live(self) -> bool:
        return self.state != "closed"


class SessionStore:
    """Process-wide map of live sessions.

    Insert, lookup and removal are serialised by one lock that is held only
    for the map operation itself, so requests for different sessions never
    wait on each other's work.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._retired: set[str] = set()
        self._lock = anyio.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def ids(self) -> list[str]:
        return list(self._sessions)

    def is_retired(self, session_id: str) -> bool:
        return session_id in self._retired

    async def add(self, session: Session) -> None:
        async with self._lock:
            if session.id in self._sessions or session.id in self._retired:
                raise SessionError(f"session id {session.id} already used")
            self._sessions[session.id] = session

    async def get(self, session_id: str | None) -> Session | None:
        if not session_id:
            return None
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None or not session.is_live:
                return None
            return session

    async def remove(self, session_id: str) -> Session | None:
        """Close and forget a session. Returns None if it was not live."""
        async with self._lock:
            session = self._sessions.pop(session_id, None)
            if session is None:
                return None
            self._retired.add(session_id)
            session.state = "closed"
            session.closed_at = time.time()
            return session

    async def remove_all(self) -> list[Session]:
        async with self._lock:
            sessions = list(self._sessions.values())
            for session in sessions:
                self._retired.add(session.id)
                session.state = "closed"
                session.closed_at = time.time()
            self._sessions.clear()
            return sessions


# ---------------------------------------------------------------------------
# HTTP routes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StartSession:
    """Session-less POST carrying an initialize request."""


@dataclass(frozen=True)
class ResumeSession:
    session: Session


@dataclass(frozen=True)
class RejectPost:
    """POST without a usable session that is not an initialize request."""


@dataclass(frozen=True)
class RejectSessionRequest:
    """GET or DELETE naming no live session."""


@dataclass(frozen=True)
class RejectHost:
    host: str


Route = (
    StartSession
    | ResumeSession
    | RejectPost
    | RejectSessionRequest
    | RejectHost
)


def _replay_receive(body: bytes, receive: Receive) -> Receive:
    """Receive callable that hands back an already consumed request body."""
    replayed = False

    async def replay() -> Message:
        nonlocal replayed
        if not replayed:
            replayed = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return replay


class SessionMultiplexer:
    """ASGI endpoint routing requests to per-session MCP transports.

    Must be running (``async with multiplexer.run():``) before it serves
    requests; each session's server loop lives in that task group.
    """

    def __init__(
        self,
        server: Server[Any, Any],
        store: SessionStore | None = None,
        allowed_hosts: list[str] | None = None,
        allowed_origins: list[str] | None = None,
        json_response: bool = True,
    ) -> None:
        self.server = server
        self.store = store if store is not None else SessionStore()
        self.allowed_hosts = list(allowed_hosts or [])
        self.json_response = json_response
        self._security = TransportSecuritySettings(
            enable_dns_rebinding_protection=bool(self.allowed_hosts),
            allowed_hosts=self.allowed_hosts,
            allowed_origins=list(allowed_origins or []),
        )
        self._task_group: TaskGroup | None = None

    @asynccontextmanager
    async def run(self) -> AsyncIterator[None]:
        """Own the task group that hosts session server loops."""
        if self._task_group is not None:
            raise RuntimeError("session multiplexer is already running")

        async with anyio.create_task_group() as tg:
            self._task_group = tg
            logger.info("session multiplexer started")
            try:
                yield
            finally:
                logger.info(
                    "session multiplexer shutting down",
                    sessions=len(self.store),
                )
                with anyio.CancelScope(shield=True):
                    for session in await self.store.remove_all():
                        await session.transport.terminate()
                tg.cancel_scope.cancel()
                self._task_group = None

    def host_allowed(self, host: str | None) -> bool:
        if not self.allowed_hosts:
            return True
        return host is not None and host in self.allowed_hosts

    async def route(
        self, method: str, session_id: str | None, payload: Any, host: str
    ) -> Route:
        """Decide how to handle a request; no side effects."""
        session = await self.store.get(session_id)
        if session is not None:
            return ResumeSession(session)

        if method == "POST":
            if not session_id and is_initialize_request(payload):
                if not self.host_allowed(host):
                    return RejectHost(host)
                return StartSession()
            return RejectPost()

        return RejectSessionRequest()

    async def __call__(
        self, scope: Scope, receive: Receive, send: Send
    ) -> None:
        request = Request(scope, receive)
        session_id = request.headers.get(MCP_SESSION_ID_HEADER)
        host = request.headers.get("host", "")

        payload: Any = None
        if request.method == "POST":
            body = await request.body()
            payload = decode_body(body)
            receive = _replay_receive(body, receive)

        route = await self.route(request.method, session_id, payload, host)

        if isinstance(route, ResumeSession):
            await self._handle_session_request(
                route.session, request.method, payload, scope, receive, send
            )
        elif isinstance(route, StartSession):
            await self._start_session(scope, receive, send)
        elif isinstance(route, RejectHost):
            logger.warning("rejected session from host %r", route.host)
            response = PlainTextResponse(
                "Invalid Host header",
                status_code=HTTPStatus.MISDIRECTED_REQUEST,
            )
            await response(scope, receive, send)
        elif isinstance(route, RejectPost):
            logger.debug("rejected POST without valid session")
            response = JSONResponse(
                bad_session_error(), status_code=HTTPStatus.BAD_REQUEST
            )
            await response(scope, receive, send)
        else:
            response = PlainTextResponse(
                INVALID_SESSION_TEXT, status_code=HTTPStatus.BAD_REQUEST
            )
            await response(scope, receive, send)

    async def _handle_session_request(
        self,
        session: Session,
        method: str,
        payload: Any,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        if method == "POST" and isinstance(payload, dict):
            message = classify_message(payload)
            if isinstance(message, UnsupportedRequest):
                logger.info(
                    "unsupported method %s", message.method, session=session.id
                )
                response = JSONResponse(method_not_found(message))
                await response(scope, receive, send)
                return

        await session.transport.handle_request(scope, receive, send)

        if session.transport.is_terminated:
            await self._close_session(session)

    async def _start_session(
        self, scope: Scope, receive: Receive, send: Send
    ) -> None:
        if self._task_group is None:
            raise RuntimeError("session multiplexer is not running")

        session_id = uuid4().hex
        transport = StreamableHTTPServerTransport(
            mcp_session_id=session_id,
            is_json_response_enabled=self.json_response,
            security_settings=self._security,
        )
        session = Session(id=session_id, transport=transport)
        await self.store.add(session)

        await self._task_group.start(self._run_session, session)

        status: int | None = None

        async def send_tracking_status(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
            await send(message)

        await transport.handle_request(scope, receive, send_tracking_status)

        if status is None or status >= HTTPStatus.BAD_REQUEST:
            # the transport refused the initialize request
            logger.info(
                "initialize rejected, discarding session",
                session=session_id,
                status=status,
            )
            await transport.terminate()
            await self._close_session(session)
            return

        session.state = "active"
        logger.info("session started", session=session_id)

    async def _run_session(
        self,
        session: Session,
        *,
        task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED,
    ) -> None:
        async with session.transport.connect() as (read_stream, write_stream):
            task_status.started()
            try:
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                    stateless=False,
                )
            except Exception as e:
                logger.error(
                    "session %s crashed: %s", session.id, e, exc_info=True
                )
            finally:
                with anyio.CancelScope(shield=True):
                    await self._close_session(session)

    async def _close_session(self, session: Session) -> None:
        if await self.store.remove(session.id) is not None:
            logger.info(
                "session closed",
                session=session.id,
                lifetime_s=round(time.time() - session.created_at, 1),
            )
