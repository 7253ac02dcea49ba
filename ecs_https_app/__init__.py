from ecs_https_app.server import create_app, main

__all__ = ["create_app", "main"]
