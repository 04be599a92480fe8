"""Test helper utilities."""

import asyncio
import json
from contextlib import asynccontextmanager

import httpx

from config.config import RECENT_ACTIVITY_PATH, SUMMARY_PATH

BACKEND_URL = "http://backend.test"


SUMMARY_DATA = {
    "queriesPerDay": [
        {"_id": "2024-01-14", "count": 12},
        {"_id": "2024-01-15", "count": 30},
        {"_id": "2024-01-16", "count": 58},
    ],
    "queryTypes": [
        {"_id": "Traffic Violation", "count": 55},
        {"_id": "Road Damage", "count": 25},
        {"_id": "Accident", "count": 20},
    ],
    "queryStatus": {"pending": 30, "inProgress": 20, "resolved": 45, "rejected": 5},
    "totalQueries": 100,
    "userCount": 40,
    "activeSessions": 12,
}


def _activity(i: int, status: str) -> dict:
    return {
        "_id": f"act_{i:03d}",
        "query_type": "Traffic Violation",
        "description": f"Report number {i}",
        "location": {"address": "123 Main St, Springfield, IL, 62704"},
        "status": status,
        "timestamp": f"2024-01-15T1{i}:30:00Z",
    }


ACTIVITY_DATA = [
    _activity(0, "Pending"),
    _activity(1, "In Progress"),
    _activity(2, "Resolved"),
    _activity(3, "Pending"),
    _activity(4, "Rejected"),
    _activity(5, "Pending"),
    _activity(6, "Resolved"),
]


def make_backend(summary=None, activity=None, *, summary_status=200, activity_status=200):
    """Build a MockTransport serving both dashboard endpoints.

    ``summary``/``activity`` are wrapped in the ``{"data": ...}`` envelope.
    Pass an ``httpx`` exception class as a status to raise it instead.
    """
    summary = SUMMARY_DATA if summary is None else summary
    activity = ACTIVITY_DATA if activity is None else activity

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == SUMMARY_PATH:
            status, payload = summary_status, summary
        elif request.url.path == RECENT_ACTIVITY_PATH:
            status, payload = activity_status, activity
        else:
            return httpx.Response(404, json={"error": "not found"})

        if isinstance(status, type) and issubclass(status, Exception):
            raise status("simulated failure", request=request)
        return httpx.Response(status, content=json.dumps({"data": payload}).encode(),
                              headers={"content-type": "application/json"})

    return httpx.MockTransport(handler)


@asynccontextmanager
async def trickle_server(chunks: int = 10, delay_s: float = 0.3):
    """Run a real local HTTP backend that sends each body in ``chunks`` pieces.

    Pieces are written ``delay_s`` apart, so no single socket read ever
    waits long. Yields the server's base URL.
    """
    handlers = set()

    async def handle(reader, writer):
        handlers.add(asyncio.current_task())
        try:
            request_line = await reader.readline()
            while (await reader.readline()) not in (b"\r\n", b""):
                pass
            parts = request_line.split()
            path = parts[1].decode() if len(parts) > 1 else ""
            payload = SUMMARY_DATA if path == SUMMARY_PATH else ACTIVITY_DATA
            body = json.dumps({"data": payload}).encode()
            writer.write(
                b"HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n"
                + f"Content-Length: {len(body)}\r\nConnection: close\r\n\r\n".encode()
            )
            step = -(-len(body) // chunks)
            for start in range(0, len(body), step):
                writer.write(body[start:start + step])
                await writer.drain()
                await asyncio.sleep(delay_s)
        except ConnectionError:
            pass
        finally:
            handlers.discard(asyncio.current_task())
            writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    host, port = server.sockets[0].getsockname()[:2]
    try:
        yield f"http://{host}:{port}"
    finally:
        server.close()
        for task in list(handlers):
            task.cancel()
        await asyncio.gather(*handlers, return_exceptions=True)
        await server.wait_closed()
