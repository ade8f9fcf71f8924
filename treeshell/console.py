# python
"""
treeshell/console.py
Line-oriented shell loop over text streams.
"""
import asyncio
import datetime
import logging
import pathlib
from typing import Any, Dict, Optional, TextIO

from .router import Router
from .session import Session, new_session_id

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "logout")


def create_session(config: Dict[str, Any]) -> Session:
    return Session(
        session_id=new_session_id(),
        # timezone-aware so duration arithmetic in shell() works
        started_ts=datetime.datetime.now(datetime.timezone.utc).isoformat(),
        username=config["shell"]["user"],
        scenario_id=config["shell"]["scenario"],
        home=config["shell"]["start_path"],
        _events_file=config["paths"]["events_file"],
    )


def create_router(config: Dict[str, Any]) -> Router:
    return Router(
        scenarios_root=pathlib.Path(config["paths"]["scenarios_root"]),
        max_output=config["limits"]["max_output_bytes"],
    )


async def shell(
    reader: TextIO,
    writer: TextIO,
    config: Dict[str, Any],
    session: Optional[Session] = None,
    router: Optional[Router] = None,
) -> Session:
    session = session or create_session(config)
    router = router or create_router(config)
    max_line = config["limits"]["max_line_length"]
    # bind the tree now so the first prompt shows the start directory
    router.resolver_for(session)
    await session.log("session.start", "connect", scenario=session.scenario_id)

    def prompt() -> str:
        return f"{session.username}@{config['shell']['hostname']}:{session.cwd}$ "

    try:
        while True:
            writer.write(prompt())
            writer.flush()
            line = await asyncio.to_thread(reader.readline)
            if not line:
                break
            line = line.rstrip("\r\n")[:max_line]
            if not line.strip():
                continue
            session.record_command(line)
            await session.log("command.input", "shell", raw=line)
            cmd = line.split()[0]
            if cmd in EXIT_COMMANDS:
                break
            try:
                out, truncated = await router.dispatch(session, line)
            except Exception as exc:
                logger.exception("handler for %s failed", cmd)
                await session.log("command.error", "shell", command=line, error=str(exc))
                out, truncated = f"sh: {cmd}: internal error", False
            await session.log(
                "command.output", "shell", bytes=len(out.encode()), truncated=truncated
            )
            if out:
                writer.write(out + "\n")
    finally:
        started = datetime.datetime.fromisoformat(session.started_ts)
        now = datetime.datetime.now(datetime.timezone.utc)
        duration_ms = int((now - started).total_seconds() * 1000)
        await session.log(
            "session.close", "close", duration_ms=duration_ms, commands=len(session.history)
        )
    return session
