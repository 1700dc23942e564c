# bluetraffic/viz/widgets/time_bar.py
import folium

from bluetraffic.traffic.time_filter import ANY_TIME, MINUTES_PER_DAY, format_time
from bluetraffic.viz.widgets.map_wrap import on_map_wrap


def build_time_bar(hourly_counts, time_value):
    """
    Time filter bar:
      - bars = trips started in each hour (click jumps to that hour)
      - slider = -1 (any time) .. 1439 minutes since midnight

    Changing the slider reloads the page with ?time=<value>.
    """
    max_count = max(hourly_counts, default=0)

    bars = []
    for hour, cnt in enumerate(hourly_counts):
        height = int((cnt / max_count) * 60) if max_count > 0 else 0
        center = hour * 60 + 30
        selected = time_value != ANY_TIME and abs(time_value - center) <= 60

        bars.append(
            f"""
            <div class="timebar-item"
                 onclick="setTime({center})"
                 title="{format_time(hour * 60)}: {cnt} trips">
              <div class="timebar-bar"
                   style="height:{height}px; opacity:{'1.0' if selected else '0.45'};">
              </div>
            </div>
            """
        )

    label = "" if time_value == ANY_TIME else format_time(time_value)
    any_display = "inline" if time_value == ANY_TIME else "none"

    return folium.Element(
        f"""
<style>
#timebar {{
  position: absolute;
  left: 0;
  right: 0;
  bottom: 14px;
  height: 120px;
  z-index: 1200;
  background: linear-gradient(
    to top,
    rgba(255,255,255,0.92),
    rgba(255,255,255,0.55),
    rgba(255,255,255,0)
  );
}}

#timebar-bars {{
  position: absolute;
  bottom: 44px;
  left: 16px;
  right: 16px;
  display: flex;
  align-items: flex-end;
  height: 64px;
}}

.timebar-item {{
  flex: 1;
  display: flex;
  align-items: flex-end;
  height: 64px;
  margin-right: 2px;
  cursor: pointer;
}}

.timebar-bar {{
  width: 100%;
  background: #4682b4;
  border-radius: 2px;
}}

#timebar-control {{
  position: absolute;
  bottom: 8px;
  left: 16px;
  right: 16px;
  display: flex;
  align-items: center;
  gap: 10px;
  font-size: 12px;
  font-weight: 600;
}}

#time-slider {{
  flex: 1;
}}

#any-time {{
  color: #777;
  font-style: italic;
}}
</style>

<div id="timebar">
  <div id="timebar-bars">
    {''.join(bars)}
  </div>
  <div id="timebar-control">
    <span>Filter by time:</span>
    <input id="time-slider" type="range" min="{ANY_TIME}" max="{MINUTES_PER_DAY - 1}"
           value="{time_value}"
           oninput="showTime(this.value)"
           onchange="setTime(this.value)">
    <time id="selected-time">{label}</time>
    <em id="any-time" style="display:{any_display}">(any time)</em>
  </div>
</div>

<script>
function formatTime(minutes) {{
  const date = new Date(0, 0, 0, 0, minutes);
  return date.toLocaleString("en-US", {{ timeStyle: "short" }});
}}

function showTime(value) {{
  const t = Number(value);
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (t === {ANY_TIME}) {{
    selected.textContent = "";
    anyTime.style.display = "inline";
  }} else {{
    selected.textContent = formatTime(t);
    anyTime.style.display = "none";
  }}
}}

function setTime(t) {{
  const url = new URL(window.location.href);
  url.searchParams.set("time", String(t));
  window.location.href = url.toString();
}}
</script>
"""
        + on_map_wrap(
            """
  const timebar = document.getElementById("timebar");
  if (timebar) wrap.appendChild(timebar);
"""
        )
    )
