# bluetraffic/viz/widgets/legend.py
import folium

from bluetraffic.viz.overlays.stations import ARRIVALS_COLOR, DEPARTURES_COLOR, flow_color
from bluetraffic.viz.widgets.map_wrap import on_map_wrap

LEGEND_CSS = """
<style>
#map-legend {
  position: absolute;
  top: 60px;
  right: 16px;
  background: rgba(255,255,255,0.9);
  padding: 8px 12px;
  border-radius: 6px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
  font-size: 12px;
  line-height: 1.6;
  z-index: 1200;
}
</style>
"""


def build_legend_widget():
    """
    Floating legend for the departures/arrivals color mix.
    """
    rows = [
        (DEPARTURES_COLOR, "more departures"),
        (flow_color(0.5), "balanced"),
        (ARRIVALS_COLOR, "more arrivals"),
    ]
    items = "".join(
        f'<div><span style="color:{color}">●</span> {label}</div>' for color, label in rows
    )

    body = f"""
  document.getElementById("map-legend")?.remove();

  const legend = document.createElement("div");
  legend.id = "map-legend";
  legend.innerHTML = `<div><strong>Legend</strong></div>{items}`;
  wrap.appendChild(legend);
"""
    return folium.Element(LEGEND_CSS + on_map_wrap(body))
