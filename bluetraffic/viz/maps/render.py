# bluetraffic/viz/maps/render.py
import folium

from bluetraffic.traffic.time_filter import format_time
from bluetraffic.viz.overlays.stations import add_station_markers
from bluetraffic.viz.widgets.legend import build_legend_widget
from bluetraffic.viz.widgets.map_wrap import on_map_wrap
from bluetraffic.viz.widgets.time_bar import build_time_bar

CENTER_LAT = 42.36027
CENTER_LON = -71.09415
ZOOM_START = 12

MAP_CSS = """
<style>
#map-wrap .leaflet-container {
  width: 100% !important;
  height: 85vh !important;
  min-height: 520px;
}
#map-title {
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}
</style>
"""


def render_map_document(
    *,
    payload,
    hourly_counts,
    title: str | None = None,
):
    """
    Single place that assembles the full Folium map HTML document.
    """

    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    # stations
    add_station_markers(m, payload)

    # timebar (widget)
    m.get_root().html.add_child(build_time_bar(hourly_counts, payload.state.time_value))

    # legend (widget)
    m.get_root().html.add_child(build_legend_widget())

    subtitle = (
        f"{payload.trip_count} trips around {format_time(payload.state.time_value)}"
        if payload.state.active
        else f"{payload.trip_count} trips, any time"
    )
    heading = f"{title} · {subtitle}" if title else subtitle

    # title + wrap so widgets sit on-map
    m.get_root().html.add_child(
        folium.Element(
            MAP_CSS
            + on_map_wrap(
                f"""
  const existingTitle = document.getElementById("map-title");
  if (existingTitle) existingTitle.remove();

  const t = document.createElement("div");
  t.id = "map-title";
  t.textContent = {heading!r};
  wrap.appendChild(t);
"""
            )
        )
    )

    return m.get_root().render()
