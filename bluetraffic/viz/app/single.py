# bluetraffic/viz/app/single.py
from __future__ import annotations

from flask import Flask, abort, jsonify, request

from bluetraffic.traffic.aggregate import hourly_departures
from bluetraffic.traffic.time_filter import ANY_TIME, MINUTES_PER_DAY
from bluetraffic.viz.maps.render import render_map_document


def _clamp_time(t: int) -> int:
    return max(ANY_TIME, min(int(t), MINUTES_PER_DAY - 1))


def _parse_time(raw, *, strict: bool = False) -> int:
    if raw is None or raw == "":
        return ANY_TIME
    try:
        return _clamp_time(int(float(raw)))
    except (TypeError, ValueError, OverflowError):
        if strict:
            abort(400, description=f"invalid time value: {raw!r}")
        return ANY_TIME


def create_app(pipeline, *, title: str | None = None) -> Flask:
    """
    Flask app over a loaded TrafficPipeline.

      /                  map document for ?time=
      /api/traffic       JSON payload for ?time=
    """
    hourly_counts = hourly_departures(pipeline.trips)

    app = Flask(__name__)

    @app.route("/")
    def _index():
        payload = pipeline.update(_parse_time(request.args.get("time")))
        return render_map_document(
            payload=payload,
            hourly_counts=hourly_counts,
            title=title,
        )

    @app.route("/api/traffic")
    def _traffic():
        payload = pipeline.update(_parse_time(request.args.get("time"), strict=True))
        return jsonify(payload.to_dict())

    return app


def serve_traffic_map(
    *,
    pipeline,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = None,
):
    """
    Serve the traffic map. Runs single-threaded: each request is one
    complete recompute cycle on the shared pipeline.
    """
    if pipeline is None:
        raise ValueError("serve_traffic_map requires a TrafficPipeline")

    app = create_app(pipeline, title=title)
    app.run(host=host, port=int(port), debug=bool(debug), threaded=False)
