"""Login, logout and registration pages."""
from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from taskboard import auth
from taskboard.database import get_db
from taskboard.dependencies import ACCESS_TOKEN_COOKIE
from taskboard.exceptions import BaseCustomHTTPException, InvalidCredentialsException
from taskboard.schemas import UserCreate, UserLogin
from taskboard.services import users as user_service
from taskboard.web.pages import render_login, render_register

router = APIRouter()


@router.get("/login", response_class=HTMLResponse)
def login_page():
    return HTMLResponse(render_login())


@router.post("/login")
def login_submit(
    username: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    try:
        token = user_service.authenticate(db, UserLogin(username=username, password=password))
    except InvalidCredentialsException as exc:
        return HTMLResponse(render_login(exc.detail, username), status_code=exc.status_code)

    response = RedirectResponse("/boards", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token.access_token,
        max_age=auth.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
def logout():
    response = RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return response


@router.get("/register", response_class=HTMLResponse)
def register_page():
    return HTMLResponse(render_register())


@router.post("/register")
def register_submit(
    username: str = Form(""),
    email: str = Form(""),
    first_name: str = Form(""),
    last_name: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    values = {"username": username, "email": email, "first_name": first_name, "last_name": last_name}
    try:
        user_in = UserCreate(password=password, **values)
        user_service.register_user(db, user_in)
    except ValidationError as exc:
        errors = [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()]
        return HTMLResponse(render_register(errors, values), status_code=status.HTTP_400_BAD_REQUEST)
    except BaseCustomHTTPException as exc:
        return HTMLResponse(render_register([exc.detail], values), status_code=exc.status_code)
    return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
