"""
Visualization Engine
====================
Plots for route analysis:
  1. Ground track (longitude vs latitude) with waypoints
  2. Altitude profile along the path
  3. Dashboard with route metrics and per-waypoint figures
  4. Animated flight along the ground track (saved as GIF)
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import matplotlib.gridspec as gridspec
from typing import Optional
import os

from .engine import TrajectoryData
from .sampler import SampledPath, sample_path


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
    'font_family': 'monospace',
}

def _apply_dark_style(fig, axes):
    """Apply consistent dark theme to figure and axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    if not isinstance(axes, np.ndarray):
        axes = [axes]
    else:
        axes = axes.flatten()

    for ax in axes:
        ax.set_facecolor(STYLE['bg_color'])
        ax.tick_params(colors=STYLE['text_color'])
        ax.xaxis.label.set_color(STYLE['text_color'])
        ax.yaxis.label.set_color(STYLE['text_color'])
        ax.title.set_color(STYLE['text_color'])
        ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
        for spine in ax.spines.values():
            spine.set_color(STYLE['grid_color'])


def _legend(ax):
    ax.legend(fontsize=10, facecolor='#1a1a1a', edgecolor='#444',
              labelcolor=STYLE['text_color'])


def _save(fig, save_path):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])


def ensure_output_dir(path: str = 'outputs'):
    os.makedirs(path, exist_ok=True)
    return path


# ══════════════════════════════════════════════════════════════════════════
#  1. Ground Track
# ══════════════════════════════════════════════════════════════════════════

def plot_ground_track(route: TrajectoryData, path: Optional[SampledPath] = None,
                      save_path: str = None, show: bool = False) -> plt.Figure:
    """Longitude/latitude plot of the sampled path with route points."""
    if path is None:
        path = sample_path(route)

    fig, ax = plt.subplots(figsize=(10, 8))
    _apply_dark_style(fig, ax)

    ax.plot(path.longitude, path.latitude,
            color=STYLE['accent_colors'][0], linewidth=2.5, label='Great-circle path')

    ax.plot(route.start.longitude, route.start.latitude, 'o', color='#00e676',
            markersize=10, label='Start', zorder=5)
    ax.plot(route.end.longitude, route.end.latitude, 'x', color='#ff5252',
            markersize=12, markeredgewidth=3, label='End', zorder=5)

    for i, wp in enumerate(route.waypoints, start=1):
        marker_color = '#ffeb3b' if wp.leg_accounted else '#888888'
        ax.plot(wp.position.longitude, wp.position.latitude, '^',
                color=marker_color, markersize=10, zorder=5)
        ax.annotate(f'WP{i}  {wp.turn_angle:+.0f}°',
                    (wp.position.longitude, wp.position.latitude),
                    textcoords='offset points', xytext=(8, 6),
                    color=STYLE['text_color'], fontsize=9)

    ax.set_xlabel('Longitude (°)', fontsize=12)
    ax.set_ylabel('Latitude (°)', fontsize=12)
    ax.set_title(f'Ground Track — {route.total_distance:.1f} km, '
                 f'{route.waypoint_count} waypoint(s)',
                 fontsize=13, fontweight='bold')
    _legend(ax)

    plt.tight_layout()
    _save(fig, save_path)
    if show:
        plt.show()
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  2. Altitude Profile
# ══════════════════════════════════════════════════════════════════════════

def plot_altitude_profile(route: TrajectoryData, path: Optional[SampledPath] = None,
                          save_path: str = None) -> plt.Figure:
    """Altitude vs ground distance flown, one colour per leg."""
    if path is None:
        path = sample_path(route)

    fig, ax = plt.subplots(figsize=(12, 5))
    _apply_dark_style(fig, ax)

    dist_km = path.cumulative_distance()
    colors = STYLE['accent_colors']
    for leg in np.unique(path.leg_index):
        mask = path.leg_index == leg
        ax.plot(dist_km[mask], path.altitude[mask] / 1000,
                color=colors[int(leg) % len(colors)], linewidth=2,
                label=f'Leg {int(leg) + 1}')
        ax.fill_between(dist_km[mask], 0, path.altitude[mask] / 1000,
                        alpha=0.08, color=colors[int(leg) % len(colors)])

    ax.set_xlabel('Distance flown (km)', fontsize=12)
    ax.set_ylabel('Altitude (km)', fontsize=12)
    ax.set_title('Altitude Profile', fontsize=13, fontweight='bold')
    ax.set_ylim(bottom=0)
    if len(np.unique(path.leg_index)) <= 6:
        _legend(ax)

    plt.tight_layout()
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  3. Dashboard
# ══════════════════════════════════════════════════════════════════════════

def plot_dashboard(route: TrajectoryData, path: Optional[SampledPath] = None,
                   save_path: str = None) -> plt.Figure:
    """Ground track + route metrics + per-waypoint speed, fuel and g-force."""
    if path is None:
        path = sample_path(route)

    fig = plt.figure(figsize=(18, 10))
    fig.patch.set_facecolor(STYLE['bg_color'])
    gs = gridspec.GridSpec(2, 3, figure=fig, hspace=0.35, wspace=0.3)

    # ── Ground track (top, spans 2 cols) ──
    ax1 = fig.add_subplot(gs[0, :2])
    _apply_dark_style(fig, ax1)
    ax1.plot(path.longitude, path.latitude, color='#00d4ff', linewidth=2.5)
    for wp in route.waypoints:
        ax1.plot(wp.position.longitude, wp.position.latitude, '^',
                 color='#ffeb3b', markersize=10)
    ax1.plot(route.end.longitude, route.end.latitude, 'x', color='#ff5252',
             markersize=14, markeredgewidth=3)
    ax1.set_xlabel('Longitude (°)')
    ax1.set_ylabel('Latitude (°)')
    ax1.set_title('GROUND TRACK', fontweight='bold', fontsize=13)

    # ── Metrics panel (top-right) ──
    ax_info = fig.add_subplot(gs[0, 2])
    ax_info.set_facecolor('#111111')
    ax_info.axis('off')

    metrics = [
        ('DISTANCE', f'{route.total_distance:.2f} km'),
        ('TRAVEL TIME', f'{route.total_travel_time:.1f} s'),
        ('BEARING', f'{route.initial_bearing:.1f}°'),
        ('CRUISE SPEED', f'{route.missile.speed:.0f} m/s'),
        ('FINAL SPEED', f'{route.current_speed:.0f} m/s'),
        ('FUEL LOAD', f'{route.missile.fuel:.0f} kg'),
        ('FUEL LEFT', f'{route.remaining_fuel:.0f} kg'),
        ('WAYPOINTS', f'{route.waypoint_count}/{route.capacity}'),
    ]
    for i, (label, value) in enumerate(metrics):
        y_pos = 0.92 - i * 0.115
        ax_info.text(0.05, y_pos, label, fontsize=10, fontweight='bold',
                     color='#888888', transform=ax_info.transAxes, fontfamily='monospace')
        value_color = '#ff5252' if label == 'FUEL LEFT' and route.fuel_exhausted else '#00d4ff'
        ax_info.text(0.95, y_pos, value, fontsize=11, fontweight='bold',
                     color=value_color, transform=ax_info.transAxes,
                     ha='right', fontfamily='monospace')
    ax_info.set_title('FLIGHT DATA', fontweight='bold',
                      color=STYLE['text_color'], fontsize=13, pad=10)

    labels = [f'WP{i}' for i in range(1, route.waypoint_count + 1)]
    index = np.arange(route.waypoint_count)

    # ── Approach/departure speed (bottom-left) ──
    ax2 = fig.add_subplot(gs[1, 0])
    _apply_dark_style(fig, ax2)
    ax2.bar(index - 0.2, [wp.approach_speed for wp in route.waypoints], 0.4,
            color='#ff6b35', label='Approach')
    ax2.bar(index + 0.2, [wp.departure_speed for wp in route.waypoints], 0.4,
            color='#00d4ff', label='Departure')
    ax2.set_xticks(index)
    ax2.set_xticklabels(labels)
    ax2.set_ylabel('Speed (m/s)')
    ax2.set_title('SPEED AT WAYPOINT', fontweight='bold')
    if route.waypoint_count:
        _legend(ax2)

    # ── Fuel consumed (bottom-center) ──
    ax3 = fig.add_subplot(gs[1, 1])
    _apply_dark_style(fig, ax3)
    ax3.bar(index, [wp.fuel_consumed for wp in route.waypoints], color='#00e676')
    ax3.set_xticks(index)
    ax3.set_xticklabels(labels)
    ax3.set_ylabel('Fuel (kg)')
    ax3.set_title('FUEL PER LEG', fontweight='bold')

    # ── G-force (bottom-right) ──
    ax4 = fig.add_subplot(gs[1, 2])
    _apply_dark_style(fig, ax4)
    ax4.bar(index, [wp.g_force for wp in route.waypoints], color='#e040fb')
    ax4.set_xticks(index)
    ax4.set_xticklabels(labels)
    ax4.set_ylabel('Load (g)')
    ax4.set_title('TURN G-FORCE', fontweight='bold')

    fig.suptitle('MISSILE TRAJECTORY DASHBOARD',
                 fontsize=16, fontweight='bold', color='#00d4ff', y=0.98)
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  4. Animated Flight (GIF)
# ══════════════════════════════════════════════════════════════════════════

def create_flight_animation(route: TrajectoryData, path: Optional[SampledPath] = None,
                            save_path: str = 'outputs/flight_anim.gif',
                            frames: int = 100) -> str:
    """Create animated GIF of the missile moving along the ground track."""
    from matplotlib.animation import FuncAnimation, PillowWriter

    if path is None:
        path = sample_path(route)

    fig, ax = plt.subplots(figsize=(10, 8))
    _apply_dark_style(fig, ax)

    lon, lat, alt = path.longitude, path.latitude, path.altitude
    pad_lon = max(np.ptp(lon) * 0.05, 0.01)
    pad_lat = max(np.ptp(lat) * 0.05, 0.01)
    ax.set_xlim(lon.min() - pad_lon, lon.max() + pad_lon)
    ax.set_ylim(lat.min() - pad_lat, lat.max() + pad_lat)
    ax.set_xlabel('Longitude (°)', fontsize=12)
    ax.set_ylabel('Latitude (°)', fontsize=12)
    ax.set_title('Flight Animation', fontsize=14, fontweight='bold')

    ax.plot(lon, lat, color=STYLE['grid_color'], linewidth=1, linestyle='--')
    trail_line, = ax.plot([], [], color='#00d4ff', linewidth=1.5, alpha=0.8)
    point, = ax.plot([], [], 'o', color='#ff6b35', markersize=8)
    info_text = ax.text(0.02, 0.95, '', transform=ax.transAxes,
                        color=STYLE['text_color'], fontsize=11, fontfamily='monospace')

    # Subsample for animation
    total_pts = len(path)
    step = max(1, total_pts // frames)
    indices = list(range(0, total_pts, step))
    if indices[-1] != total_pts - 1:
        indices.append(total_pts - 1)

    def animate(frame_idx):
        idx = indices[min(frame_idx, len(indices) - 1)]
        trail_line.set_data(lon[:idx+1], lat[:idx+1])
        point.set_data([lon[idx]], [lat[idx]])
        info_text.set_text(
            f'lat={lat[idx]:.3f} | lon={lon[idx]:.3f} | alt={alt[idx]:.0f} m | '
            f'leg {int(path.leg_index[idx]) + 1}'
        )
        return trail_line, point, info_text

    anim = FuncAnimation(fig, animate, frames=len(indices), interval=50, blit=True)
    anim.save(save_path, writer=PillowWriter(fps=20),
              savefig_kwargs={'facecolor': STYLE['bg_color']})
    plt.close(fig)
    return save_path
