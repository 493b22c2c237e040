from fastapi import Header, HTTPException, status


async def verify_user(x_user_id: str = Header(None, alias="X-User-Id")) -> str:
    """
    Resolve the signed-in user

    Authentication happens upstream; the gateway forwards the user id.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    return x_user_id.strip()
