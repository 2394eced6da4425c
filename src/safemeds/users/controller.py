from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.http import current_user_id, json_body, login_required
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from .model import User


def user_json(user: User) -> dict:
    return {
        "id": user.user_id,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "email": user.email,
        "phone": user.phone,
        "username": user.username,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        user = container.auth_service.authenticate(body.get("username", ""), body.get("password", ""))

        session.permanent = bool(body.get("rememberMe"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        session["user_id"] = user.user_id
        session["name"] = user.full_name
        return jsonify(user_json(user))

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Signed out"})

    @app.route("/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(user_json(container.auth_service.get_user(current_user_id())))
