#!/usr/bin/env python3
"""
Daily Primary Production at a Station
=====================================

This example runs the model for one water column and one day and shows:
- The chlorophyll profile
- Column production through the morning
- Euphotic depth at each timestep

Inputs come either from the command line or from a YAML/JSON configuration
file (see ConfigurationManager.create_example_config for the layout).

Usage:
    python 01_daily_production.py
    python 01_daily_production.py --lat -27.0 --chl 0.06 --par 25.5
    python 01_daily_production.py --config station.yaml
    python 01_daily_production.py --help

Output:
    - Console: Daily production summary and timestep table
    - Graph: daily_production.png
"""

import argparse
import logging
import sys

import numpy as np

# Add parent directory to path for running without installation
sys.path.insert(0, '..')

from dwcpn import calc_pp, ModelInputs, ModelSettings, ConfigurationManager, DwcpnError


def parse_args():
    parser = argparse.ArgumentParser(
        description="Compute daily water-column primary production for one station",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Temperate North Atlantic, 1 May
  %(prog)s --lat 18.7 --chl 1.7         # Upwelling station
  %(prog)s --profile gaussian --z-m 60  # Deep chlorophyll maximum
        """
    )
    parser.add_argument("--config", type=str, default=None,
                        help="YAML or JSON configuration file (overrides other inputs)")
    parser.add_argument("--lat", type=float, default=43.2, help="Latitude in degrees (default: 43.2)")
    parser.add_argument("--day", type=int, default=121, help="Day of year (default: 121)")
    parser.add_argument("--chl", type=float, default=0.474, help="Surface chlorophyll [mg m^-3]")
    parser.add_argument("--par", type=float, default=50.35, help="Daily PAR [einstein m^-2 d^-1]")
    parser.add_argument("--alpha-b", type=float, default=0.0578, help="Initial P-I slope")
    parser.add_argument("--pmb", type=float, default=3.294, help="Assimilation number")
    parser.add_argument("--profile", choices=["uniform", "gaussian"], default="uniform",
                        help="Chlorophyll profile shape (default: uniform)")
    parser.add_argument("--mld", type=float, default=20.0, help="Mixed-layer depth [m]")
    parser.add_argument("--z-m", type=float, default=50.0, help="Depth of the chlorophyll maximum [m]")
    parser.add_argument("--rho", type=float, default=2.0, help="Peak height relative to background")
    parser.add_argument("--sigma", type=float, default=10.0, help="Peak width [m]")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show per-timestep log output")
    parser.add_argument("--no-plot", action="store_true", help="Disable plotting (text output only)")
    parser.add_argument("--output", type=str, default="daily_production.png",
                        help="Output filename for the plot")
    return parser.parse_args()


def main():
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config:
        loaded = ConfigurationManager().load(args.config)
        if not loaded.is_valid:
            print("Configuration is invalid:")
            for error in loaded.validation_errors:
                print(f"  - {error}")
            sys.exit(1)
        inputs, settings = loaded.inputs, loaded.settings
    else:
        inputs = ModelInputs(
            lat=args.lat, iday=args.day, chl=args.chl, par=args.par,
            alpha_b=args.alpha_b, pmb=args.pmb, mld=args.mld, z_m=args.z_m,
            rho=args.rho, sigma=args.sigma, z_bottom=5000.0,
        )
        settings = ModelSettings(profile_shape=args.profile)

    print("=" * 70)
    print("DAILY PRIMARY PRODUCTION")
    print("=" * 70)
    print(f"Latitude: {inputs.lat:.2f} deg, day {inputs.iday}")
    print(f"Chlorophyll: {inputs.chl:.3f} mg m^-3 ({settings.profile_shape} profile)")
    print(f"Daily PAR: {inputs.par:.2f} einstein m^-2 d^-1")

    try:
        out = calc_pp(inputs, settings)
    except DwcpnError as e:
        print(f"\nModel run failed: {e}")
        sys.exit(1)

    print("\n" + "-" * 70)
    print(f"Sunrise:               {out.sunrise:8.3f} h")
    print(f"Day length:            {out.day_length:8.3f} h")
    print(f"Noon irradiance:       {out.iom:8.3f} einstein m^-2 h^-1")
    print(f"Daily production:      {out.pp:8.2f} mg C m^-2 d^-1")
    print(f"Max euphotic depth:    {out.euphotic_depth:8.2f} m")
    print(f"Spectral I*:           {out.spectral_i_star:8.4f}")
    print(f"Failed timesteps:      {out.failed_timesteps:8d}")

    ts = out.time_series
    print("\n" + "-" * 70)
    print(f"{'Time (h)':>10} {'Zenith (deg)':>14} {'P (mg C/m^2/h)':>16} {'Zeu (m)':>10}")
    print("-" * 70)
    for t, z, p, zeu in zip(ts.times, ts.zenith_d, ts.production, ts.euphotic_depth):
        print(f"{t:>10.3f} {z:>14.2f} {p:>16.3f} {zeu:>10.2f}")

    if not args.no_plot:
        try:
            import matplotlib.pyplot as plt

            fig, axes = plt.subplots(1, 3, figsize=(15, 5))
            fig.suptitle(f'Daily Production (lat={inputs.lat:.1f}, day={inputs.iday}, '
                         f'PP={out.pp:.0f} mg C m^-2 d^-1)', fontsize=14, fontweight='bold')

            # Plot 1: Chlorophyll profile
            ax1 = axes[0]
            shown = out.depth <= min(2.0 * max(out.euphotic_depth, 1.0), out.depth[-1])
            ax1.plot(out.chl_profile[shown], out.depth[shown], 'g-', linewidth=2)
            ax1.axhline(out.euphotic_depth, color='k', linestyle='--', alpha=0.5, label='Max euphotic depth')
            ax1.invert_yaxis()
            ax1.set_xlabel('Chlorophyll (mg m^-3)')
            ax1.set_ylabel('Depth (m)')
            ax1.set_title('Chlorophyll Profile')
            ax1.legend()
            ax1.grid(True, alpha=0.3)

            # Plot 2: Column production, mirrored about noon
            ax2 = axes[1]
            t_full = np.concatenate(([out.sunrise], ts.times, 24.0 - ts.times[-2::-1], [24.0 - out.sunrise]))
            p_full = np.concatenate(([0.0], ts.production, ts.production[-2::-1], [0.0]))
            ax2.plot(t_full, p_full, 'b-o', linewidth=2, markersize=4)
            ax2.set_xlabel('Local solar time (h)')
            ax2.set_ylabel('Column production (mg C m^-2 h^-1)')
            ax2.set_title('Production Through the Day')
            ax2.grid(True, alpha=0.3)

            # Plot 3: Euphotic depth
            ax3 = axes[2]
            ax3.plot(ts.times[ts.valid], ts.euphotic_depth[ts.valid], 'r-s', linewidth=2)
            ax3.invert_yaxis()
            ax3.set_xlabel('Local solar time (h)')
            ax3.set_ylabel('Euphotic depth (m)')
            ax3.set_title('Euphotic Depth')
            ax3.grid(True, alpha=0.3)

            plt.tight_layout()
            plt.savefig(args.output, dpi=150, bbox_inches='tight')
            print(f"\nPlot saved to: {args.output}")

        except ImportError:
            print("\nNote: matplotlib not available, skipping plot generation")


if __name__ == "__main__":
    main()
