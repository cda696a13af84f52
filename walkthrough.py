"""
a guided tour of seqops: loops replaced by map, keep, detect and friends.

    python walkthrough.py [--verbose]
"""
import argparse
import logging
import math
import string

import numpy as np
import pandas as pd

from seqops import S, from_frame, from_named, configure_logging, TypeMismatch
from seqops import functions as fn

logger = logging.getLogger(__name__)

cars = pd.DataFrame({
    'mpg': [21.0, 22.8, 21.4, 18.7, 18.1, 14.3, 24.4, 22.8, 19.2, 17.8, 16.4, 32.4],
    'cyl': [6, 4, 6, 8, 6, 8, 4, 4, 6, 6, 8, 4],
    'wt':  [2.620, 2.320, 3.215, 3.440, 3.460, 3.570, 3.190, 3.150, 3.440, 3.440, 4.070, 2.200],
})


def show(title, value):
    print(f"{title:<34} {value}")


def mapping():
    show("square roots", S([9, 16, 25]).map(math.sqrt).to.list())
    show("typed map (bool)", S(range(1, 6)).map_bool(lambda x: x > 2).to.list())
    show("powers with map2", S([1, 2, 3]).zip.map2([1, 2, 3], pow).to.list())
    show("indexed map", S(['a', 'b']).imap(lambda v, i: f"{i}{v}").to.list())
    try:
        S([1, 2]).map_int(lambda x: x / 2).to.list()
    except TypeMismatch as e:
        show("typed map refuses floats", e)


def plucking():
    letters = {'lowers': list(string.ascii_lowercase), 'uppers': list(string.ascii_uppercase)}
    show("second lowercase letter", fn.pluck(letters, 'lowers', 2))
    people = S([{'name': 'ann', 'age': 31}, {'name': 'bob', 'age': 45}])
    show("names of everyone", people.map('name').to.list())


def filtering():
    numbers = S(range(11, 21))
    show("evens", numbers.keep(lambda x: x % 2 == 0).to.list())
    show("odds", numbers.discard(lambda x: x % 2 == 0).to.list())
    show("all above ten", numbers.every(lambda x: x > 10))
    show("any above twenty", numbers.some(lambda x: x > 20))
    show("has 15", numbers.has_element(15))
    show("first multiple of 7", numbers.detect(lambda x: x % 7 == 0))
    show("its position", numbers.detect_index(lambda x: x % 7 == 0))


def modifying():
    numbers = S(range(11, 21))
    show("zero at 1, 3, 5", numbers.modify_at([1, 3, 5], lambda x: 0).to.list())
    show("negate evens", numbers.modify_if(lambda x: x % 2 == 0, lambda x: -x).to.list())


def reshaping():
    people = from_named(ann={'age': 31, 'city': 'oslo'}, bob={'age': 45, 'city': 'rome'})
    show("transposed", people.util.transpose().to.plain())
    show("flattened", S([[1, 2], [3], 4]).util.flatten().to.list())
    show("running total", S([1, 2, 3, 4]).accumulate(lambda a, b: a + b).to.list())


def frames():
    show("column medians", from_frame(cars).map_float(lambda col: col.median()).to.dict())
    slopes = (from_frame(cars, by='cyl')
              .map(lambda df: np.polyfit(df['wt'], df['mpg'], 1))
              .map_float(1))
    show("mpg per 1000 lbs, by cylinders", slopes.map(lambda s: round(s, 2)).to.dict())


def main():
    parser = argparse.ArgumentParser(description="walk through the seqops combinators")
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    args = parser.parse_args()
    configure_logging(logging.DEBUG if args.verbose else None)

    for section in (mapping, plucking, filtering, modifying, reshaping, frames):
        logger.info(f"section: {section.__name__}")
        section()
        print()


if __name__ == "__main__":
    main()
