"""Show one color on the configured hue lamps, then give them back."""
import argparse
import logging
import time

from hueframe.config import load_settings
from hueframe.services.device_controller import DeviceController


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hueframe", description=__doc__)
    parser.add_argument("red", type=int, choices=range(256), metavar="RED")
    parser.add_argument("green", type=int, choices=range(256), metavar="GREEN")
    parser.add_argument("blue", type=int, choices=range(256), metavar="BLUE")
    parser.add_argument("--lights", type=int, default=None,
                        help="number of lamps to drive (default: HUE_LIGHT_IDS or 1)")
    parser.add_argument("--hold", type=float, default=2.0,
                        help="seconds to keep the color before restoring")
    parser.add_argument("--env-file", default=None, help="path of a .env file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.env_file)
    count = args.lights or len(settings.light_ids) or 1
    # keep the lamps claimed while holding
    settings = settings.model_copy(update={"idle_timeout": max(settings.idle_timeout, args.hold + 1.0)})

    with DeviceController.from_settings(settings) as device:
        device.write([(args.red, args.green, args.blue)] * count)
        time.sleep(args.hold)


if __name__ == "__main__":
    main()
