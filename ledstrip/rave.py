"""
Rave mode: a new random color on a fixed interval
"""

import logging
import random
import time
from typing import Callable, Optional

from .color_utils import random_color
from .led_controller import LEDController

log = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 200


def run_rave(
    controller: LEDController,
    delay_ms: int = DEFAULT_DELAY_MS,
    rng: Optional[random.Random] = None,
    sleep: Callable[[float], None] = time.sleep,
    count: Optional[int] = None,
) -> int:
    """Send random colors until interrupted or a send fails.

    The first TransportError propagates immediately. With ``count`` set the
    loop stops after that many frames; returns the number of frames sent.
    """
    if delay_ms < 0:
        raise ValueError(f"Delay must be >= 0 ms, got {delay_ms}")
    if count is not None and count < 1:
        raise ValueError(f"Count must be >= 1, got {count}")

    log.info("Rave mode on %s every %d ms", controller.target, delay_ms)
    sent = 0
    while count is None or sent < count:
        color = random_color(rng)
        controller.set_color(color)
        sent += 1
        log.debug("Rave frame %d: %s", sent, color.to_hex())
        sleep(delay_ms / 1000.0)
    return sent
