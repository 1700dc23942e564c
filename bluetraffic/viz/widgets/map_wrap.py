# bluetraffic/viz/widgets/map_wrap.py


def on_map_wrap(body: str) -> str:
    """
    <script> that runs `body` once the page has loaded, with `wrap` bound to
    the #map-wrap div around the Leaflet container (created on first use),
    so overlays can be positioned on top of the map.
    """
    return f"""
<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    wrap.style.position = "relative";
    wrap.style.width = "100%";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

{body}
}});
</script>
"""
