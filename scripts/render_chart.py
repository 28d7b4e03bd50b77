#!/usr/bin/env python3
"""
Chart of Nuclides Rendering Script
==================================

Renders a ``;``-delimited nuclide table into a standalone SVG chart.

Usage:
    python scripts/render_chart.py data.csv chart.svg

    # Embed the page stylesheet so the SVG renders on its own:
    python scripts/render_chart.py data.csv chart.svg --stylesheet chartstyle.css

    # Drop unusable rows instead of stopping at the first one:
    python scripts/render_chart.py data.csv chart.svg --skip-malformed

    # Custom geometry / link target:
    python scripts/render_chart.py data.csv chart.svg --config chart.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

from nuclide_chart.config import ChartConfig
from nuclide_chart.data.loader import read_table
from nuclide_chart.data.nuclide import MalformedRecordError
from nuclide_chart.visualization import ChartOfNuclides, save_svg

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def main():
    """Render the chart."""
    parser = argparse.ArgumentParser(
        description='Render a chart of nuclides as SVG',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('datafile', type=str, help='Nuclide table (;-delimited)')
    parser.add_argument('outfile', type=str, help='Output SVG file')
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='YAML chart config (default: built-in layout)'
    )
    parser.add_argument(
        '--stylesheet',
        type=str,
        default=None,
        help='CSS file to embed in the SVG'
    )
    parser.add_argument(
        '--skip-malformed',
        action='store_true',
        help='Skip unusable rows instead of aborting'
    )

    args = parser.parse_args()

    config = ChartConfig.load_yaml(args.config) if args.config else ChartConfig()
    if args.skip_malformed:
        config.on_malformed = 'skip'

    stylesheet = None
    if args.stylesheet:
        stylesheet = Path(args.stylesheet).read_text(encoding='utf-8')

    try:
        scene = ChartOfNuclides(config).build_chart(read_table(args.datafile))
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except MalformedRecordError as e:
        logger.error(f"{e} (use --skip-malformed to ignore such rows)")
        return 1

    save_svg(scene, args.outfile, stylesheet=stylesheet)
    return 0


if __name__ == '__main__':
    sys.exit(main())
