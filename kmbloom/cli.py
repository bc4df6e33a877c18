import sys
import csv
import signal
import logging
from argparse import ArgumentParser

from kmbloom.filter import BloomFilter

logger = logging.getLogger(__name__)


def write_exit_msg():
    if sys.stdout.isatty():
        sys.stdout.write('Use q or Ctrl-D to exit.\n')
        sys.stdout.flush()


def signal_handler(sig, frame):
    write_exit_msg()


def reply(line):
    sys.stdout.write(line)
    sys.stdout.write('\n')
    if sys.stdout.isatty():
        sys.stdout.flush()


def malformed(row):
    logger.debug('malformed command: %r', row)
    sys.stderr.write('malformed command.\n')


def parse(fd, bloom):
    csv_reader = csv.reader(fd, delimiter=' ', quotechar='"')
    for row in csv_reader:
        if not row:
            continue
        try:
            op = row[0]
            if op == 'i' or op == 'a':
                bloom.insert(row[1])
            elif op == 'c':
                reply('1' if bloom.contains(row[1]) else '0')
            elif op == 's':
                reply(f'{bloom.optimal_m} {bloom.optimal_k} {bloom.fill_ratio:.6f}')
            elif op == 'q':
                return
            else:
                malformed(row)
        except IndexError:
            malformed(row)


def main(argv=None):
    signal.signal(signal.SIGINT, signal_handler)

    parser = ArgumentParser(description='query a bloom filter with commands: i <item>, c <item>, s, q')
    parser.add_argument('-f', type=str, help='path to input file')
    parser.add_argument('-v', action='store_true', help='verbose logging')
    parser.add_argument('--items', type=int, help='expected number of items', default=1000)
    parser.add_argument('--fp-rate', type=float, help='acceptable false positive rate', default=0.01)
    parser.add_argument('--seeds', type=int, nargs=2, help='two distinct seeds for a reproducible filter')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.v else logging.WARNING)

    try:
        bloom = BloomFilter(args.items, args.fp_rate, seeds=args.seeds)
    except ValueError as e:
        parser.error(str(e))

    write_exit_msg()

    if args.f:
        with open(args.f, 'r') as fd:
            parse(fd, bloom)
    else:
        parse(sys.stdin, bloom)


if __name__ == '__main__':
    main()
