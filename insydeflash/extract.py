# SPDX-License-Identifier: MIT
import argparse, os, sys

from .version import __version__
from .search import find_pattern
from .header import SIGNATURE, image_header, parse_header, derive_range
from .errors import *

VERSION = f'InsydeFlashExtractor v{__version__}'

def error(s):
    sys.stderr.write(s)
    sys.stderr.write('\n')
    sys.stderr.flush()

def human_size(size):
    scale = 0
    while size > 1200 and scale < 3:
        size /= 1024
        scale += 1
    b = ['B', 'KiB', 'MiB', 'GiB'][scale]
    return f'{round(size, 1)} {b}'

def load_image(path):
    try:
        f = open(path, 'rb')
    except OSError as e:
        raise FileOpenError(f'Input file can\'t be opened: {e}') from e

    with f:
        try:
            size = os.fstat(f.fileno()).st_size
            data = f.read()
        except MemoryError as e:
            raise OutOfMemory('Can\'t allocate memory for input file') from e
        except OSError as e:
            raise FileReadError(f'Can\'t read input file: {e}') from e

    if len(data) < size:
        raise FileReadError(f'Can\'t read input file: got {len(data)} of {size} bytes')
    return data

def locate(data, signature=SIGNATURE):
    offset = find_pattern(data, signature)
    if offset is None:
        raise SignatureNotFound('Insyde BIOS image signature not found in input file')
    return derive_range(data, offset, signature)

def discard(path):
    # devices such as /dev/full stay where they are
    if os.path.isfile(path):
        os.remove(path)

def write_range(data, rng, path):
    try:
        f = open(path, 'wb')
    except OSError as e:
        raise FileOpenError(f'Output file can\'t be opened: {e}') from e

    try:
        with f:
            written = f.write(memoryview(data)[rng.offset:rng.end])
            f.flush()
    except OSError as e:
        discard(path)
        raise FileWriteError(f'Can\'t write output file: {e}') from e

    if written != rng.size:
        discard(path)
        raise FileWriteError(f'Can\'t write output file: wrote {written} of {rng.size} bytes')

def describe(data, rng, signature=SIGNATURE):
    offset = rng.offset - image_header(len(signature)).sizeof()
    hdr, _ = parse_header(data, offset, signature)
    print(f'Signature {signature.decode("ascii", errors="replace")} found at {offset:#010x}')
    print(f'  full size: {hdr.full_size:#010x} ({human_size(int(hdr.full_size))})')
    print(f'  used size: {hdr.used_size:#010x} ({human_size(int(hdr.used_size))})')

def extract(infile, outfile, signature=SIGNATURE, dry_run=False, verbose=False):
    """
    Pull the BIOS image out of infile and write it to outfile. Nothing is
    written unless the whole image is present in infile.
    """
    data = load_image(infile)
    rng = locate(data, signature)

    if verbose or dry_run:
        describe(data, rng, signature)
    if dry_run:
        print(f'Would extract {rng.offset:08x}:{rng.size:08x} ({human_size(rng.size)}) to {outfile}')
        return rng

    if verbose:
        print(f'Extracting {rng.offset:08x}:{rng.size:08x} ({human_size(rng.size)}) to {outfile}')
    write_range(data, rng, outfile)
    return rng


class ArgumentParser(argparse.ArgumentParser):
    # the original tool reports bad arguments with its own exit code, not 2
    def error(self, message):
        self.print_usage(sys.stderr)
        raise InvalidParameter(f'{self.prog}: error: {message}')

def signature_arg(text):
    try:
        sig = text.encode('ascii')
    except UnicodeEncodeError:
        raise argparse.ArgumentTypeError(f'signature must be ASCII: {text!r}')
    if not sig:
        raise argparse.ArgumentTypeError('signature must not be empty')
    return sig

def main(argv=None):
    parser = ArgumentParser(prog='insydeflash',
                            description=f'{VERSION}: extract the BIOS image from an InsydeFlash update')
    parser.add_argument('infile', help='InsydeFlash update or firmware image')
    parser.add_argument('outfile', help='filename of the extracted BIOS image')
    parser.add_argument('--signature', '-s', type=signature_arg, default=SIGNATURE,
                        help=f'image header signature (default: {SIGNATURE.decode()})')
    parser.add_argument('--dry-run', '-n', action='store_true', help='only show what would be extracted')
    parser.add_argument('--verbose', '-v', action='store_true', help='print header details')
    parser.add_argument('--version', action='version', version=VERSION)

    try:
        args = parser.parse_args(argv)
        extract(args.infile, args.outfile, args.signature, dry_run=args.dry_run, verbose=args.verbose)
    except ExtractError as e:
        error(str(e))
        return e.exit_code

    if not args.dry_run:
        print(f'File {args.outfile} successfully extracted')
    return 0

if __name__ == '__main__':
    sys.exit(main())
