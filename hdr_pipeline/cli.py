"""
Command line entry point

    hdr-pipeline IMG_1.JPG IMG_2.JPG IMG_3.JPG -r camera.rsp \\
        --diameter 3612 --xleft 1019 --ydown 74 [--xdim 1000 --ydim 1000]

    python -m hdr_pipeline ... --preflight
"""
import argparse
import sys

from hdr_pipeline.core.config import get_config
from hdr_pipeline.core.exceptions import ConfigError
from hdr_pipeline.core.interfaces import ToolchainConfig
from hdr_pipeline.core.logger import get_logger, setup_logger_from_config
from hdr_pipeline.orchestrator import HDRPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hdr-pipeline",
        description="Merge bracketed exposures into a calibrated, cropped and resized HDR image",
    )
    parser.add_argument("images", nargs="*", help="bracketed exposures (JPEG), in order")
    parser.add_argument("-r", "--response-function", required=True, help="camera response function (.rsp)")

    geometry = parser.add_argument_group("fisheye geometry (pixels)")
    geometry.add_argument("--diameter", required=True, help="fisheye view diameter")
    geometry.add_argument("--xleft", required=True, help="x of the bottom-left corner of the fisheye square")
    geometry.add_argument("--ydown", required=True, help="y of the bottom-left corner of the fisheye square")
    geometry.add_argument("--xdim", help="target width (default: pipeline.target_resolution)")
    geometry.add_argument("--ydim", help="target height (default: pipeline.target_resolution)")

    paths = parser.add_argument_group("toolchain (default: settings.yaml)")
    paths.add_argument("--radiance-path", help="directory with ra_xyze, pcompos and pfilt")
    paths.add_argument("--hdrgen-path", help="directory with hdrgen")
    paths.add_argument("--output-path", help="output directory")
    paths.add_argument("--temp-path", help="directory for output1.hdr .. output4.hdr")

    parser.add_argument("--preflight", action="store_true", help="check the toolchain before running")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logger_from_config(level=args.log_level)
    logger = get_logger("hdr_pipeline.cli")

    try:
        config = get_config()
        tools = config.get_required("tools")
    except ConfigError as e:
        print(f"settings error: {e}", file=sys.stderr)
        return 1

    toolchain = ToolchainConfig.from_settings(
        config,
        radiance_path=args.radiance_path,
        hdrgen_path=args.hdrgen_path,
        output_path=args.output_path,
        temp_path=args.temp_path,
    )
    target = str(config.get("pipeline.target_resolution", 1000))

    pipeline = HDRPipeline(tools=tools)

    if args.preflight:
        preflight = pipeline.preflight_check(toolchain)
        print(preflight.summary(), file=sys.stderr)
        if not preflight.passed:
            logger.error(f"Preflight failed: {preflight.get_failures()}")
            return 1

    result = pipeline.execute(
        toolchain,
        input_images=args.images,
        response_function=args.response_function,
        diameter=args.diameter,
        xleft=args.xleft,
        ydown=args.ydown,
        xdim=args.xdim or target,
        ydim=args.ydim or target,
    )

    if not result.success:
        print(result.error, file=sys.stderr)
        return 1

    print(result.artifact)
    return 0


if __name__ == "__main__":
    sys.exit(main())
