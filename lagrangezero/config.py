"""
Module for ``lagrangezero``'s command line configuration.

This module can be used to:

* define default configuration settings
* load a configuration from the command line
"""

from argparse import ArgumentParser
import logging

DEFAULT_INPUT_FILE = "input.json"


class RecoveryConfig(object):
    input_path = DEFAULT_INPUT_FILE
    log_level = logging.WARNING

    @staticmethod
    def build_parser():
        parser = ArgumentParser(
            prog="lagrangezero",
            description="Prints the constant term of the polynomial through "
            "the points of a JSON input file.",
        )

        parser.add_argument(
            "input_path",
            nargs="?",
            default=DEFAULT_INPUT_FILE,
            help=f"Path of the JSON input file. Defaults to '{DEFAULT_INPUT_FILE}'.",
        )

        parser.add_argument(
            "-v",
            "--verbose",
            dest="verbose",
            action="store_true",
            help="Log selection and interpolation details to stderr.",
        )

        return parser

    @staticmethod
    def load_config(argv=None):
        args = RecoveryConfig.build_parser().parse_args(argv)

        RecoveryConfig.input_path = args.input_path
        RecoveryConfig.log_level = logging.DEBUG if args.verbose else logging.WARNING

        return RecoveryConfig
