import os
import sys

from dotenv import load_dotenv

load_dotenv()

from readme_stats.aggregator import aggregate
from readme_stats.config import load_config
from readme_stats.registry.npms import NpmsClient
from readme_stats.renderer import load_template, render, write_output
from readme_stats.utils.logger import setup_logging


def main():
    dry_run = "--dry-run" in sys.argv
    logger = setup_logging(os.environ.get("LOG_LEVEL", "INFO"))
    logger.info("Starting README generation")

    try:
        config = load_config()
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    try:
        with NpmsClient(config.registry_url, timeout=config.request_timeout) as client:
            result = aggregate(
                config.packages, client, presence_filter=config.presence_filter,
            )

        template = load_template(config.template_path)
        readme = render(template, result)

        if dry_run:
            logger.info("Dry run, skipping write to %s\n%s", config.output_path, readme)
            return

        write_output(config.output_path, readme)
    except Exception:
        logger.exception("README generation failed")
        sys.exit(1)

    logger.info("Generated readme file successfully.")


if __name__ == "__main__":
    main()
