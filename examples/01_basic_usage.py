"""
Basic usage example of fastapi-request-guard.

Demonstrates:
- Propagating the client IP with ClientIPMiddleware
- Gating routes behind a session with flow_dependency
- Reading the one-shot "error" message on the home page
"""

from fastapi import Depends, FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from fastapi_request_guard import (
    ClientIPMiddleware,
    Flow,
    RequestContext,
    SessionRequired,
    StarletteSessionStore,
    client_ip,
    client_ip_from_context,
    flow_dependency,
)

app = FastAPI(title="Request Guard Example")

# SessionMiddleware must wrap everything that touches the session, so it is
# added last (outermost).
app.add_middleware(ClientIPMiddleware)
app.add_middleware(SessionMiddleware, secret_key="change-me")

sessions = StarletteSessionStore()
auth_flow = Flow(SessionRequired(sessions))


@app.get("/")
async def home(request: Request, ip: str = Depends(client_ip)):
    """Public page - shows any pending login message."""
    return {"ip": ip, "error": await sessions.pop(request, "error")}


@app.post("/login")
async def login(request: Request):
    """Mock login - marks the session as authenticated."""
    await sessions.put(request, "user", {"id": 1, "name": "demo"})
    return {"message": "Logged in"}


@app.get("/profile")
async def profile(ctx: RequestContext = Depends(flow_dependency(auth_flow))):
    """Protected page - redirects to / with 307 when not logged in."""
    return {"message": "Welcome back", "ip": client_ip_from_context(ctx)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -i http://localhost:8000/profile
    # curl -c jar -b jar -X POST http://localhost:8000/login
    # curl -b jar -H "X-Forwarded-For: 203.0.113.5" http://localhost:8000/profile
