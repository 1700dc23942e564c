# bluetraffic/viz/overlays/stations.py
import folium

from bluetraffic.traffic.time_filter import format_time

DEPARTURES_COLOR = "#4682b4"  # steelblue
ARRIVALS_COLOR = "#ff8c00"  # darkorange


def _hex_to_rgb(c):
    c = c.lstrip("#")
    return tuple(int(c[i:i + 2], 16) for i in (0, 2, 4))


def flow_color(flow_ratio):
    """
    Mix of the departures and arrivals colors.
    1.0 -> all departures color, 0.0 -> all arrivals color.
    """
    dep = _hex_to_rgb(DEPARTURES_COLOR)
    arr = _hex_to_rgb(ARRIVALS_COLOR)
    rgb = [round(d * flow_ratio + a * (1 - flow_ratio)) for d, a in zip(dep, arr)]
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def add_station_markers(m, payload):
    """
    Draw one circle per station sized by traffic and colored by flow.
    Zero-radius stations are skipped.
    """
    t_value = payload.state.time_value

    for s in payload.stations:
        vis = payload.visuals[s.id]
        if vis.radius <= 0:
            continue

        popup = [
            f"<b>{s.name}</b>",
            f"{s.total_traffic} trips",
            f"{s.departures} departures",
            f"{s.arrivals} arrivals",
        ]
        if t_value >= 0:
            popup.insert(1, f"Around {format_time(t_value)}")

        color = flow_color(vis.flow_ratio)
        folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=vis.radius,
            fill=True,
            color="white",
            fill_color=color,
            fill_opacity=0.6,
            weight=1,
            tooltip="<br>".join(popup),
        ).add_to(m)
