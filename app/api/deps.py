# py
from fastapi import HTTPException, Request, status
from app.core.rate_limiter import allow_request


async def rate_limit(request: Request):
    client_key = request.client.host if request.client else "anonymous"
    allowed = await allow_request(client_key)
    if not allowed:
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="Rate limit exceeded")
    return client_key
