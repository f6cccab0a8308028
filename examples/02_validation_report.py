#!/usr/bin/env python3
"""
Validation Report
=================

Runs every registered validation (reference station runs and the solar
constant table) and plots computed against reference daily production.

Usage:
    python 02_validation_report.py
    python 02_validation_report.py --json validation.json
    python 02_validation_report.py --no-plot

Output:
    - Console: Validation summary
    - Graph: validation_report.png
"""

import argparse
import sys

import numpy as np

# Add parent directory to path for running without installation
sys.path.insert(0, '..')

from dwcpn.validation import run_all_validations


def parse_args():
    parser = argparse.ArgumentParser(description="Run the DWCPN validation suite")
    parser.add_argument("--json", type=str, default=None, help="Save results to a JSON file")
    parser.add_argument("--no-plot", action="store_true", help="Disable plotting (text output only)")
    parser.add_argument("--output", type=str, default="validation_report.png",
                        help="Output filename for the plot")
    return parser.parse_args()


def main():
    args = parse_args()

    suite = run_all_validations(verbose=True)

    if args.json:
        suite.save(args.json)
        print(f"Results saved to: {args.json}")

    stations = [r for r in suite.results if r.test_name.startswith("daily_production_")]

    if not args.no_plot and stations:
        try:
            import matplotlib.pyplot as plt

            reference = np.array([r.reference for r in stations])
            computed = np.array([r.computed for r in stations])
            labels = [r.test_name.replace("daily_production_", "") for r in stations]

            fig, ax = plt.subplots(figsize=(7, 6))
            ax.loglog(reference, computed, 'bo', markersize=8)
            for x, y, label in zip(reference, computed, labels):
                ax.annotate(label, (x, y), textcoords="offset points", xytext=(5, 5), fontsize=8)

            lims = [reference.min() / 2.0, reference.max() * 2.0]
            ax.plot(lims, lims, 'k--', alpha=0.5, label='1:1')
            ax.set_xlabel('Reference PP (mg C m^-2 d^-1)')
            ax.set_ylabel('Computed PP (mg C m^-2 d^-1)')
            ax.set_title(f'Daily Production Validation ({suite.n_passed}/{suite.n_tests} passed)')
            ax.legend()
            ax.grid(True, alpha=0.3, which='both')

            plt.tight_layout()
            plt.savefig(args.output, dpi=150, bbox_inches='tight')
            print(f"\nPlot saved to: {args.output}")

        except ImportError:
            print("\nNote: matplotlib not available, skipping plot generation")


if __name__ == "__main__":
    main()
