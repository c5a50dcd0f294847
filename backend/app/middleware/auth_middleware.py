from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from app.config import settings
from app.schemas.auth import SessionUser
from app.services.record_store import RecordStore, get_record_store
from app.utils.permissions import ALL_ROLES, PARENT

security = HTTPBearer()

ALGORITHM = "HS256"


def decode_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        return payload
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    store: RecordStore = Depends(get_record_store),
) -> SessionUser:
    payload = decode_token(credentials.credentials)
    user_id = payload.get("sub")
    role = payload.get("role")
    if user_id is None or role not in ALL_ROLES:
        raise HTTPException(status_code=401, detail="Invalid token payload")

    if role != PARENT:
        return SessionUser(id=user_id, name=payload.get("name") or "", role=role, email=settings.ADMIN_EMAIL)

    # 관리자가 삭제한 학부모는 다음 요청부터 접근할 수 없다.
    parent = store.find_parent(user_id)
    if not parent:
        raise HTTPException(status_code=401, detail="Parent not registered")
    return SessionUser(id=parent.student_id, name=parent.parent_name, role=PARENT, phone=parent.parent_phone)


def require_roles(*roles: str):
    def checker(current_user: SessionUser = Depends(get_current_user)) -> SessionUser:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role: {', '.join(roles)}",
            )
        return current_user
    return checker
