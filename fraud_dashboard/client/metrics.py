import math

ANIMATED_METRICS = ("totalCustomers", "criticalCases", "highRiskCases", "avgFraudScore")
TEXT_METRICS = ("detectionRate",)
ERROR_PLACEHOLDER = "Error"

ANIMATION_DURATION_SECONDS = 1.0
FRAME_INTERVAL_SECONDS = 1 / 60


def interpolate(target, elapsed, duration=ANIMATION_DURATION_SECONDS):
    """Counter value ``elapsed`` seconds into a 0 -> target animation.

    In-progress values are floored; the final frame shows the exact target.
    """
    if duration <= 0:
        return target
    progress = min(max(elapsed, 0) / duration, 1)
    if progress >= 1:
        return target
    return math.floor(target * progress)


def animation_frames(target, duration=ANIMATION_DURATION_SECONDS, frame_interval=FRAME_INTERVAL_SECONDS):
    frames = []
    elapsed = 0.0
    while elapsed < duration:
        frames.append(interpolate(target, elapsed, duration))
        elapsed += frame_interval
    frames.append(target)
    return frames


def metric_display(metrics):
    display = {name: metrics.get(name, 0) for name in ANIMATED_METRICS}
    display["detectionRate"] = str(metrics.get("detectionRate", "0%"))
    return display


def error_display():
    return {name: ERROR_PLACEHOLDER for name in ANIMATED_METRICS + TEXT_METRICS}


__all__ = [
    "ANIMATED_METRICS",
    "ERROR_PLACEHOLDER",
    "TEXT_METRICS",
    "animation_frames",
    "error_display",
    "interpolate",
    "metric_display",
]
