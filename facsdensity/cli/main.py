import argparse
import sys

from facsdensity.core.errors import FACSDensityError
from facsdensity.utils.logging import log_error


def build_parser():
    parser = argparse.ArgumentParser(
        prog="facsdensity",
        description="FACSDensity: ridge density plots of FCS time series."
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ------------------------------------------------------------
    # plot
    # ------------------------------------------------------------
    plot = subparsers.add_parser(
        "plot",
        help="Plot one channel of all FCS files of a sample across time points."
    )
    plot.add_argument("--id", required=True, dest="identifier",
                      help="Sample identifier contained in the FCS file names")
    plot.add_argument("--dir", default=".", dest="directory",
                      help="Directory with the FCS files (default: current directory)")
    plot.add_argument("--outdir", default=None,
                      help="Output directory (default: --dir)")
    plot.add_argument("--config", default=None, help="Plot config YAML")
    plot.add_argument("--gate", nargs=2, type=float, metavar=("LOWER", "UPPER"),
                      default=None, help="Restrict the saved plot to this x range")
    plot.add_argument("--channel", default=None, help="Channel to plot (default: FL1-A)")
    plot.add_argument("--x-label", default=None, dest="x_axis_label")
    plot.add_argument("--y-label", default=None, dest="y_axis_label")
    plot.add_argument("--color", default=None, dest="plot_color")
    plot.add_argument("--alpha", type=float, default=None, dest="plot_transparency",
                      help="Fill opacity between 0 and 1")
    plot.add_argument("--format", default=None, dest="file_format",
                      help="Output format: jpeg or pdf")
    plot.add_argument("--no-input", dest="user_input", action="store_const",
                      const=False, default=None,
                      help="Save without asking")
    plot.add_argument("--strict-timepoints", dest="on_duplicate", action="store_const",
                      const="error", default=None,
                      help="Fail when two files map to the same time point")

    # ------------------------------------------------------------
    # generate-config
    # ------------------------------------------------------------
    gen = subparsers.add_parser(
        "generate-config",
        help="Write a plot config YAML with all default settings."
    )
    gen.add_argument("--out", required=True, help="Output YAML config file")

    return parser


def main(argv=None):
    parser = build_parser()

    # ------------------------------------------------------------
    # Parse args
    # ------------------------------------------------------------
    args = parser.parse_args(argv)

    # ------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------
    if args.command == "plot":
        from facsdensity.cli.plot_density import cmd_plot_density
        return cmd_plot_density(
            args.identifier,
            args.directory,
            args.outdir,
            config_file=args.config,
            gate=args.gate,
            channel=args.channel,
            x_axis_label=args.x_axis_label,
            y_axis_label=args.y_axis_label,
            plot_color=args.plot_color,
            plot_transparency=args.plot_transparency,
            file_format=args.file_format,
            user_input=args.user_input,
            on_duplicate=args.on_duplicate,
        )

    elif args.command == "generate-config":
        from facsdensity.cli.generate_config import cmd_generate_config
        try:
            return cmd_generate_config(args.out)
        except FACSDensityError as e:
            log_error(str(e))
            return 1

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
