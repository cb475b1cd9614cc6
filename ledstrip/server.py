"""
LED Strip FastAPI Server
Single-shot control of one strip over HTTP
"""

import logging

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .color_utils import NAMED_COLORS
from .config import CommandRequest
from .exceptions import TransportError
from .led_controller import LEDController

log = logging.getLogger(__name__)


def create_app(controller: LEDController) -> FastAPI:
    app = FastAPI(
        title="LED Strip Controller API",
        description="Power and color control for a WiFi LED strip",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.controller = controller

    @app.get("/")
    def root():
        return {"message": f"LED Strip Controller API v{__version__}", "target": controller.target}

    @app.get("/colors")
    def get_colors():
        """Named color table"""
        return {name: color.to_hex() for name, color in NAMED_COLORS.items()}

    # Sync handlers run in the threadpool; the controller lock keeps sends one at a time
    @app.post("/command")
    def control_strip(command: CommandRequest):
        """Send one command to the strip"""
        try:
            if command.action == "on":
                frame = controller.power_on()
            elif command.action == "off":
                frame = controller.power_off()
            else:
                if not command.has_color():
                    raise HTTPException(status_code=400, detail="No color given")
                frame = controller.set_color(command.to_color())
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except TransportError as e:
            log.warning("Command %s failed: %s", command.action, e)
            raise HTTPException(status_code=502, detail=str(e))

        return {
            "message": "Command executed",
            "action": command.action,
            "frame": frame.hex(),
        }

    return app


def serve(controller: LEDController, host: str = "127.0.0.1", port: int = 8000, log_level: str = "info"):
    """Run the API with uvicorn until interrupted"""
    uvicorn.run(
        create_app(controller),
        host=host,
        port=port,
        log_level=log_level,
        access_log=False,
    )
