# src/featuretour/sections.py
"""
The printed tour: one function per numbered section.
"""

import functools
import logging
from datetime import date, datetime, time, timedelta
from typing import Callable, Dict, Optional

import torch

from . import dates, maps, parallel, streams
from .config import TourConfig
from .converter import Something, convert
from .enums import Section
from .formula import ScaledSqrtFormula
from .functional import (
    Optional as Opt,
    and_then,
    compare,
    comparing,
    negate,
    non_null,
    sort_with,
)
from .person import Person, PersonFactory
from .system import number_of_cores


logger = logging.getLogger(__name__)

NUMBERS = (1, 24, 45, 62, 85, 8, 91, 3, 5, 56, 9)
NAMES = ("Tom", "Jerry", "Jane", "Jack")


def sub_header(letter: str, title: str) -> None:
    print(f"     {letter}) {title}")


def default_methods(config: TourConfig) -> None:
    formula = ScaledSqrtFormula()
    print(f"calculate: {formula.calculate(100)}")
    print(f"sqrt: {formula.sqrt(16)}")


def lambda_expressions(config: TourConfig) -> None:
    names = ["a", "b", "c", "d"]

    def descending(a: str, b: str) -> int:
        return compare(b, a)

    names = sort_with(names, descending)
    # shorter versions
    names = sort_with(names, lambda a, b: compare(b, a))
    names = sorted(names, reverse=True)
    logger.debug(f"names sorted descending: {names}")


def functional_interfaces(config: TourConfig) -> None:
    converter = lambda s: int(s)
    print(f"converted: {convert(converter, '1234')}")


def method_references(config: TourConfig) -> None:
    print(f"converted: {convert(float, '1234.1234')}")

    something = Something()
    print(f"converted: {convert(something.starts_with, 'Java Developpers')}")

    person_factory: PersonFactory = Person
    person = person_factory("Kim", "Jong")
    print(f"person.firstName: {person.first_name}")
    print(f"person.lastName: {person.last_name}")


def lambda_scopes(config: TourConfig) -> None:
    num = 5
    string_converter = lambda value: str(value + num)
    print(f"converted: {convert(string_converter, 12)}")


def builtin_functional_interfaces(config: TourConfig) -> None:
    sub_header("a", "Predicates")
    predicate = lambda s: len(s) > 0
    print(f"predicate test: {predicate('foo')}")
    print(f"predicate test negate: {negate(predicate)('foo')}")
    print(f"predicate test negate negate: {negate(negate(predicate))('foo')}")
    print(f"predicate nonNull test null: {non_null(None)}")
    print(f"predicate nonNull test true: {non_null(True)}")

    sub_header("b", "Functions")
    back_to_string = and_then(int, str)
    print(f"function backToString: {back_to_string('123')}")

    sub_header("c", "Suppliers")
    person_supplier: Callable[[], Person] = Person
    for _ in range(2):
        new_person = person_supplier()
        print(f"person firstname: {new_person.first_name}")
        print(f"person lastname: {new_person.last_name}")

    sub_header("d", "Consumers")
    greeter = lambda p: print(f"Hello {p.first_name} {p.last_name}")
    greeter(Person("Peter", "Muster"))

    sub_header("e", "Comparators")
    first_name_comparator = comparing(lambda p: p.first_name)
    last_name_comparator = comparing(lambda p: p.last_name)
    alice = Person("Alice", "Muster")
    peter = Person("Peter", "Muster")
    print(f"Alice compare to Peter: {first_name_comparator(alice, peter)}")
    print(f"Muster compare to Muster: {last_name_comparator(alice, peter)}")

    sub_header("f", "Optionals")
    optional = Opt.of("Test")
    print(f"Optional 'Test' - is present: {optional.is_present()}")
    print(f"Optional 'Test' - get: {optional.get()}")
    print(f"Optional 'Test' - or else: {optional.or_else('fallbackstring')}")
    optional.if_present(lambda s: print(s[0]))
    optional.if_present(lambda s: print(s[3]))


def stream_operations(config: TourConfig) -> None:
    collection = list(streams.SAMPLE_COLLECTION)

    sub_header("a", "Filter")
    for s in streams.filter_prefix(collection, "a"):
        print(s)

    sub_header("b", "Sorted")
    for s in streams.sorted_filter_prefix(collection, "a"):
        print(s)

    sub_header("c", "Map")
    for s in streams.upper_sorted(collection):
        print(s)

    sub_header("d", "Match")
    print(f"startsWithA: {streams.any_match_prefix(collection, 'a')}")

    sub_header("e", "Count")
    print(f"startsWithB: {streams.count_prefix(collection, 'b')}")

    sub_header("f", "Reduce")
    streams.reduce_joined(collection).if_present(print)


def parallel_streams(config: TourConfig) -> None:
    values = parallel.generate_identifiers(config.parallel_sort_size)

    sub_header("a", "Sequential Sort")
    timing = parallel.timed_sort(parallel.sequential_sort, values)
    print(f"count: {timing.count}")
    print(f"sequential sort took: {timing.millis} ms")

    sub_header("b", "Parallel Sort")
    workers = parallel.resolve_workers(config.workers)
    timing = parallel.timed_sort(functools.partial(parallel.parallel_sort, workers=workers), values)
    print(f"count: {timing.count}")
    print(f"parallel sort took: {timing.millis} ms ({workers} workers)")


def map_utilities(config: TourConfig) -> None:
    values = maps.build_value_map(10)
    for key, value in values.items():
        print(value)

    maps.compute_if_present(values, 3, lambda key, value: value + str(key))
    print(f"map.get(3): {values.get(3)}")


def date_api(config: TourConfig) -> None:
    sub_header("a", "Clock")
    print(f"milliSeconds: {dates.clock_millis()}")
    print(f"legacyDate: {dates.legacy_date(datetime.now().astimezone())}")

    sub_header("b", "Timezones")
    if config.show_all_zones:
        print(dates.available_zone_ids())
    zone1 = dates.zone(config.zone1)
    zone2 = dates.zone(config.zone2)
    print(f"zone1 Rules: {dates.zone_rules(zone1)}")
    print(f"zone2 Rules: {dates.zone_rules(zone2)}")

    sub_header("c", "LocalTime")
    now1 = dates.local_time_in(zone1)
    now2 = dates.local_time_in(zone2)
    print(f"now1.isBefore(now2): {now1 < now2}")
    print(f"hoursBetween: {dates.hours_between(now1, now2)}")
    print(f"minutesBetween: {dates.minutes_between(now1, now2)}")
    print(f"late: {time(23, 59, 59)}")
    print(f"leetTime: {dates.parse_german_time('06:13')}")

    sub_header("d", "LocalDate")
    today = date.today()
    tomorrow = today + timedelta(days=1)
    yesterday = tomorrow - timedelta(days=2)
    logger.debug(f"today={today} tomorrow={tomorrow} yesterday={yesterday}")
    print(f"dayOfWeek: {dates.day_of_week(date(2014, 7, 4))}")
    print(dates.parse_german_date("24.12.2014"))

    sub_header("e", "LocalDateTime")
    sylvester = datetime(2014, 12, 31, 23, 59, 59)
    print(f"dayOfWeek: {dates.day_of_week(sylvester)}")
    print(f"month: {dates.month_name(sylvester)}")
    print(f"minuteOfDay: {dates.minute_of_day(sylvester)}")
    print(f"legacyDate: {dates.legacy_date(sylvester.astimezone())}")


def annotations(config: TourConfig) -> None:
    pass


def double_sum(numbers) -> float:
    """Sum as float64 on a tensor."""
    return torch.tensor(numbers, dtype=torch.float64).sum().item()


def hidden_features(config: TourConfig) -> None:
    print(f"Number of cores on my system: {number_of_cores()} cores!!!")
    print(", ".join(map(str.upper, NAMES)))
    print(f"total is: {double_sum(NUMBERS)}")
    # or another way
    print(f"total is: {float(sum(NUMBERS))}")


SECTIONS: Dict[Section, Callable[[TourConfig], None]] = {
    Section.DEFAULT_METHODS: default_methods,
    Section.LAMBDA_EXPRESSIONS: lambda_expressions,
    Section.FUNCTIONAL_INTERFACES: functional_interfaces,
    Section.METHOD_REFERENCES: method_references,
    Section.LAMBDA_SCOPES: lambda_scopes,
    Section.BUILTIN_FUNCTIONAL_INTERFACES: builtin_functional_interfaces,
    Section.STREAMS: stream_operations,
    Section.PARALLEL_STREAMS: parallel_streams,
    Section.MAP: map_utilities,
    Section.DATE_API: date_api,
    Section.ANNOTATIONS: annotations,
    Section.HIDDEN_FEATURES: hidden_features,
}


def run_tour(config: Optional[TourConfig] = None) -> None:
    """Print the selected sections in order."""
    config = config or TourConfig()

    # Set up logging based on config
    if config.verbose:
        logging.getLogger("featuretour").setLevel(logging.DEBUG)
    else:
        logging.getLogger("featuretour").setLevel(logging.WARNING)

    for section in config.selected_sections():
        logger.info(f"Running section {section.number}: {section.title}")
        print(section.header)
        SECTIONS[section](config)
