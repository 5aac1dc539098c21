# __main__.py

import argparse
import logging
import sys
from pathlib import Path

from photoframe.config import load_settings
from photoframe.constants import SHAPE_TYPES
from photoframe.controller import EditorSession
from photoframe.errors import PhotoFrameError
from photoframe.scheduler import ManualTimerHost
from photoframe.utils.geometry import LayoutMode

logger = logging.getLogger("photoframe")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='photoframe',
                                     description='Frame a photo in a shape and add a caption')
    parser.add_argument('image', nargs='?', help='Image to open')
    parser.add_argument('-t', '--text', default='', help='Caption text')
    parser.add_argument('-s', '--shape', default=None, choices=SHAPE_TYPES, help='Frame shape')
    parser.add_argument('-m', '--mode', default=None, choices=[m.value for m in LayoutMode],
                        help='Layout mode (default: fill)')
    parser.add_argument('--color', default=None, help="Caption colour, e.g. '#ffcc00'")
    parser.add_argument('--size', type=int, default=None, help='Caption size in pixels (16-48)')
    parser.add_argument('--position', default=None, metavar='X,Y', help='Caption centre on the canvas')
    parser.add_argument('--config', default=None, help='JSON settings file')
    parser.add_argument('-e', '--export', dest='export_png', metavar='OUT.png',
                        help='Render once, write the PNG and exit')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='More logging (-vv for debug)')
    return parser


def apply_arguments(session: EditorSession, args):
    if args.shape:
        session.set_shape(args.shape)
    if args.color:
        session.set_caption_color(args.color)
    if args.size is not None:
        session.set_caption_size(args.size)
    if args.position:
        x, y = (float(v) for v in args.position.split(','))
        session.set_caption_position(x, y)
    if args.text:
        session.set_caption_text(args.text)


def export(args, settings) -> int:
    if not args.image:
        logger.error("--export needs an input image")
        return 2
    host = ManualTimerHost()
    session = EditorSession(timer_host=host, settings=settings)
    apply_arguments(session, args)

    errors = []
    session.load_image(Path(args.image).read_bytes(), on_complete=lambda _src, err: errors.append(err))
    host.run_pending()
    if errors and errors[0] is not None:
        return 1

    png = session.export_png()
    if png is None:
        logger.error("Nothing was rendered")
        return 1
    Path(args.export_png).write_bytes(png)
    logger.info("Wrote %s (%d bytes)", args.export_png, len(png))
    session.teardown()
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        settings = load_settings(args.config, layout_mode=args.mode)
        if args.export_png:
            return export(args, settings)
    except (PhotoFrameError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    import tkinter as tk
    from photoframe.view import run_editor

    root = tk.Tk()
    session = EditorSession(timer_host=root, settings=settings)
    apply_arguments(session, args)
    run_editor(session, root, image_path=args.image)
    return 0


if __name__ == '__main__':
    sys.exit(main())
