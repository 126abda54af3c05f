"""
Day-ahead arbitrage with a 100 kWh battery.

Reads an hourly price series, computes the profit-maximizing charge/discharge
schedule with the LP dispatch optimizer, prints the schedule and the
equivalent-cycle summary and saves everything to a spreadsheet.

Usage:
    python run_dispatch.py
    python run_dispatch.py --prices my_prices.xlsx --output Results.xlsx --plot dispatch.html
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from battery_dispatch import BatteryCore, DispatchOptimizer
from battery_dispatch.io import read_prices, write_results
from battery_dispatch.reporting import format_cycle_summary, format_schedule

DATA_PATH = Path(__file__).parent / 'data'

# Battery configuration
BATTERY = {
    'capacity_max': 100.0,       # kWh
    'capacity_min': 0.0,         # kWh
    'power_charge_max': 30.0,    # kWh per step
    'power_discharge_max': 30.0, # kWh per step
    'eta_charge': 0.95,
    'eta_discharge': 0.95,
    'energy_initial': 0.0,       # kWh
}


def run_scenario(
    prices_file: Path,
    output_file: Path,
    sep: str = ';',
    plot_file: Optional[Path] = None,
) -> None:
    """Run one dispatch optimization and report the result."""

    print("=" * 70)
    print("BATTERY DISPATCH - LP OPTIMIZATION")
    print("=" * 70)

    # ========================================================================
    # 1. Load Data
    # ========================================================================
    print("\n[1/4] Loading prices...")
    if not prices_file.exists():
        print(f"ERROR: Price data not found at {prices_file}")
        return

    prices = read_prices(prices_file, sep=sep)
    print(f"  > Loaded {len(prices)} timesteps from {prices_file.name}")

    # ========================================================================
    # 2. Configure Battery
    # ========================================================================
    print("\n[2/4] Configuring battery...")
    battery = BatteryCore.from_dict(BATTERY)
    print(f"    Capacity:    {battery.capacity_min:.0f}-{battery.capacity_max:.0f} kWh")
    print(f"    Power:       {battery.power_charge_max:.0f} / {battery.power_discharge_max:.0f} kWh/step")
    print(f"    Efficiency:  {battery.eta_charge:.1%} / {battery.eta_discharge:.1%} "
          f"(round-trip {battery.round_trip_efficiency:.1%})")

    # ========================================================================
    # 3. Optimize
    # ========================================================================
    print("\n[3/4] Optimizing...")
    result = DispatchOptimizer(battery, prices).optimize()

    if not result.success:
        print(f"\nNo solution found ({result.status.value}). {result.message}")
        write_results(result, output_file)
        return

    plan = result.plan
    print(f"\nMaximum profit = {plan.objective_value:.2f}")
    print(format_schedule(plan))
    print()
    print(format_cycle_summary(plan))

    steps = plan.simultaneous_steps()
    if steps:
        print(f"\nWARNING: simultaneous charge and discharge at steps {steps}")

    # ========================================================================
    # 4. Save Results
    # ========================================================================
    print("\n[4/4] Saving results...")
    write_results(result, output_file)
    print(f"  > Results saved to {output_file}")

    if plot_file is not None:
        from battery_dispatch.visualization import DispatchPlots

        fig = DispatchPlots.create_dispatch_profile(result)
        fig.write_html(str(plot_file))
        print(f"  > Dispatch plot saved to {plot_file}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Optimize a battery charge/discharge schedule")
    parser.add_argument("--prices", type=Path, default=DATA_PATH / 'day_ahead_prices.csv',
                        help="Price file (.xlsx or .csv)")
    parser.add_argument("--sep", type=str, default=';',
                        help="CSV field separator")
    parser.add_argument("--output", type=Path, default=Path('Results.xlsx'),
                        help="Result file (.xlsx or .csv)")
    parser.add_argument("--plot", type=Path, default=None,
                        help="Optional HTML file for the dispatch plot")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    run_scenario(args.prices, args.output, sep=args.sep, plot_file=args.plot)


if __name__ == "__main__":
    main()
