# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.traffic.types import ANY_TIME, MINUTES_PER_DAY


def build_time_slider(view, *, query_key="time"):
    """
    Time-of-day slider.

    Dragging updates the label in the page (same "1:30 PM" format as the
    server); releasing reloads the page with ?time=<minutes> so the server
    recomputes the station traffic. -1 is "any time".
    """
    value = view.time_filter
    any_display = "none" if view.is_filtered else "inline"

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 13px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter label {{
  display: flex;
  gap: 8px;
  align-items: baseline;
}}
#time-slider {{
  width: 260px;
}}
#selected-time {{
  display: inline-block;
  min-width: 64px;
  font-weight: 600;
}}
#any-time {{
  color: #888;
  font-style: italic;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range"
           min="{ANY_TIME}" max="{MINUTES_PER_DAY - 1}" value="{value}">
  </label>
  <time id="selected-time">{view.selected_time}</time>
  <em id="any-time" style="display:{any_display};">(any time)</em>
</div>

<script>
function formatTime(minutes) {{
  const h = Math.floor(minutes / 60);
  const m = minutes % 60;
  const h12 = (h % 12) || 12;
  return h12 + ":" + String(m).padStart(2, "0") + (h < 12 ? " AM" : " PM");
}}

function updateTimeDisplay(v) {{
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (v === {ANY_TIME}) {{
    selected.textContent = "";
    anyTime.style.display = "inline";
  }} else {{
    selected.textContent = formatTime(v);
    anyTime.style.display = "none";
  }}
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  if (!slider) return;

  slider.addEventListener("input", () => updateTimeDisplay(Number(slider.value)));
  slider.addEventListener("change", () => {{
    const url = new URL(window.location.href);
    url.searchParams.set("{query_key}", slider.value);
    window.location.href = url.toString();
  }});

  const wrap = document.getElementById("map-wrap");
  const box = document.getElementById("time-filter");
  if (wrap && box) wrap.appendChild(box);
}});
</script>
"""
    )
