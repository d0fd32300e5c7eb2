# demo.py - fetch or search Kitsu resources from the command line
import argparse
import asyncio
import logging
import logging.config
import os
import sys

from kitsu import AsyncKitsuClient, ConfigManager, KitsuClient, KitsuError, ResponseError

base_dir = os.path.dirname(os.path.abspath(__file__))
config_path = os.path.join(base_dir, 'config', 'config.ini')
logging_config_path = os.path.join(base_dir, 'config', 'logging.conf')

RESOURCES = {
    "anime": ("get_anime", "search_anime"),
    "manga": ("get_manga", "search_manga"),
    "character": ("get_character", "search_characters"),
    "producer": ("get_producer", "search_producers"),
    "user": ("get_user", "search_users"),
}

logger = logging.getLogger("kitsu.demo")


def title_of(item):
    attrs = item.attributes
    return getattr(attrs, "canonical_title", None) or getattr(attrs, "name", "")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Kitsu API demo")
    parser.add_argument("resource", choices=sorted(RESOURCES))
    parser.add_argument("--id", type=int, help="fetch a single resource by id")
    parser.add_argument("--filter", nargs=2, action="append", metavar=("KEY", "VALUE"), default=[],
                        help="search filter, e.g. --filter text 'non non biyori'")
    parser.add_argument("--use-async", action="store_true", help="use AsyncKitsuClient")
    return parser.parse_args(argv)


def run_sync(config, args):
    get_name, search_name = RESOURCES[args.resource]
    with KitsuClient.from_config(config) as client:
        if args.id is not None:
            return [getattr(client, get_name)(args.id).data]
        return getattr(client, search_name)(lambda s: apply_filters(s, args.filter)).data


async def run_async(config, args):
    get_name, search_name = RESOURCES[args.resource]
    async with AsyncKitsuClient.from_config(config) as client:
        if args.id is not None:
            return [(await getattr(client, get_name)(args.id)).data]
        return (await getattr(client, search_name)(lambda s: apply_filters(s, args.filter))).data


def apply_filters(search, filters):
    for key, value in filters:
        search = search.filter(key, value)
    return search


def main(argv=None):
    if os.path.exists(logging_config_path):
        logging.config.fileConfig(logging_config_path, disable_existing_loggers=False)
    else:
        logging.basicConfig(level=logging.INFO)

    args = parse_args(argv)
    config = ConfigManager(config_path)
    try:
        items = asyncio.run(run_async(config, args)) if args.use_async else run_sync(config, args)
    except ResponseError as e:
        logger.error(f"{e.message}: {e.response.text[:200]}")
        return 1
    except KitsuError as e:
        logger.error(e.message)
        return 1

    for item in items:
        print(f"{item.id}\t{title_of(item)}")
    logger.info(f"{len(items)} result(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
