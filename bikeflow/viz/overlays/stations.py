import html

import folium

DEPARTURES_COLOR = "#4682b4"  # steelblue
ARRIVALS_COLOR = "#ff8c00"    # darkorange


def _hex_to_rgb(h):
    h = h.lstrip("#")
    return tuple(int(h[i:i + 2], 16) for i in (0, 2, 4))


def flow_color(flow_bucket):
    """
    Blend departures and arrivals colors.
    flow_bucket 1.0 -> all departures color, 0.0 -> all arrivals color.
    """
    w = max(0.0, min(1.0, float(flow_bucket)))
    dep = _hex_to_rgb(DEPARTURES_COLOR)
    arr = _hex_to_rgb(ARRIVALS_COLOR)
    rgb = [round(w * d + (1.0 - w) * a) for d, a in zip(dep, arr)]
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def station_popup_html(s, view):
    popup = [
        f"<b>{html.escape(s.name)}</b>",
        f"Arrivals: {s.arrivals}",
        f"Departures: {s.departures}",
        f"Total: {s.total_traffic}",
    ]
    if view.is_filtered:
        popup.insert(1, f"Around {view.selected_time}")
    return "<br>".join(popup)


def add_traffic_markers(m, view):
    """
    One circle per station, sized and colored from the traffic view.
    """
    for s in view.stations:
        color = flow_color(s.flow_bucket)

        folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=s.radius,
            color="white",
            weight=1,
            fill=True,
            fill_color=color,
            fill_opacity=0.6,
            opacity=0.8,
            tooltip=s.tooltip_text,
            popup=station_popup_html(s, view),
        ).add_to(m)
