#!/usr/bin/env python
"""Convert colors between the fractional format used in game data files and
24-bit hexadecimal HTML color codes.

Fractional format:  color <name> <r#> <g#> <b#> [<a#>]
HTML format:        color <name> #<rr><gg><bb>

Modes of operation:

  --es-to-hex <file>   Read fractional colors from <file>, and print each as
                       "<name>" #RRGGBB

  --hex-to-es <file>   Read HTML colors from <file>, and print each as
                       color "<name>" <r#> <g#> <b#>

  <r#> <g#> <b#> [<a#>]
                       Convert one fractional color to an HTML color code.
                       Alpha, if given, is ignored

  #<rr><gg><bb>        Convert one HTML color code to fractional values

Use "-" as <file> to read from standard input. Files ending in ".gz" or
".bz2" are decompressed. Lines that are not color records are skipped.

An input file, if given, takes precedence over colors on the command line,
which are then ignored, wherever they appear. Only one of --es-to-hex and
--hex-to-es may be given. Otherwise, the first argument beginning with "#"
is converted; failing that, the first three numbers are.
"""
import argparse
import inspect
import sys
import warnings

from colorconv.color.formatters import (fractions_to_hex, hex_to_fractions, format_values,
                                        format_hex_record, format_es_record)
from colorconv.readers.colors import ESColorReader, HexColorReader
from colorconv.readers.datafile import DataNode
from colorconv.util.io.filters import NameDateWriter
from colorconv.util.io.openers import get_short_name, opener, NullWriter
from colorconv.util.scriptlib.help_formatters import format_module_docstring
from colorconv.util.services.exceptions import ArgumentWarning, warn

warnings.simplefilter("once")
printer = NameDateWriter(get_short_name(inspect.stack()[-1][1]))

EXIT_OK    = 0
EXIT_USAGE = 1
EXIT_NOOP  = 2


#===============================================================================
# INDEX: argument parsing
#===============================================================================

class ConverterArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with full help text on
    standard output, exiting with status 1"""

    def error(self,message):
        sys.stdout.write("Error: %s\n\n" % message)
        self.print_help(sys.stdout)
        self.exit(EXIT_USAGE)


def get_parser():
    """Build the parser for :py:func:`main`

    Returns
    -------
    :class:`ConverterArgumentParser`
    """
    parser = ConverterArgumentParser(description=format_module_docstring(__doc__),
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--es-to-hex",dest="es_to_hex",metavar="infile.txt",default=None,
                       help="Read fractional colors from infile.txt and print them as HTML color codes")
    group.add_argument("--hex-to-es",dest="hex_to_es",metavar="infile.txt",default=None,
                       help="Read HTML colors from infile.txt and print them in fractional format")
    parser.add_argument("-q","--quiet",default=False,action="store_true",
                        help="Suppress progress messages on standard error")
    parser.add_argument("values",nargs="*",metavar="color",
                        help="Fractional channels 'r g b [a]', or one HTML color code '#RRGGBB'")
    return parser



#===============================================================================
# INDEX: conversions
#===============================================================================

def es_file_to_hex(*streams):
    """Convert every fractional color record in `streams` to a line of
    form `"<name>" #RRGGBB`

    Parameters
    ----------
    *streams : str or file-like
        Filenames or open filehandles of input data

    Returns
    -------
    list
        Output lines, in input order, without line terminators
    """
    reader = ESColorReader(*streams)
    results = [format_hex_record(X.name,fractions_to_hex(X.channels)) for X in reader]
    reader.close()
    return results

def hex_file_to_es(*streams):
    """Convert every HTML color record in `streams` to a line of
    form `color "<name>" <r#> <g#> <b#>`

    Parameters
    ----------
    *streams : str or file-like
        Filenames or open filehandles of input data

    Returns
    -------
    list
        Output lines, in input order, without line terminators
    """
    reader = HexColorReader(*streams)
    results = [format_es_record(X.name,X.channels) for X in reader]
    reader.close()
    return results

def convert_file(filename,convert,log=printer):
    """Apply a file conversion to `filename` and print the results to standard output

    Undecodable bytes in the input are replaced rather than raising. If
    `filename` cannot be opened, an :class:`ArgumentWarning` is issued and
    no colors are printed.

    Parameters
    ----------
    filename : str
        Name of input file, or `'-'` for standard input

    convert : callable
        :func:`es_file_to_hex` or :func:`hex_file_to_es`

    log : file-like, optional
        Logger implementing a ``write()`` method (Default: `printer`)
    """
    log.write("Reading colors from %s..." % ("standard input" if filename == "-" else filename))
    try:
        if filename == "-":
            if hasattr(sys.stdin,"reconfigure"):
                sys.stdin.reconfigure(errors="replace")
            results = convert(sys.stdin)
        else:
            with opener(filename,errors="replace") as fin:
                results = convert(fin)
    except OSError as e:
        warn("Could not read colors from %s: %s" % (filename,e.strerror or e),category=ArgumentWarning)
        results = []

    for line in results:
        sys.stdout.write(line + "\n")

    log.write("Converted %s colors." % len(results))

def values_to_hex(values):
    """Convert fractional channels given as command-line arguments to an HTML color code

    Parameters
    ----------
    values : list
        Three or more str. Only the first three are used

    Returns
    -------
    str
    """
    node = DataNode(values)
    return fractions_to_hex([node.value(i) for i in range(3)])



#===============================================================================
# INDEX: program body
#===============================================================================

def main(argv=sys.argv[1:]):
    """Command-line program

    Parameters
    ----------
    argv : list, optional
        A list of command-line arguments, which will be processed
        as if the script were called from the command line if
        :py:func:`main` is called directly.

        Default: `sys.argv[1:]`. The command-line arguments, if the script is
        invoked from the command line

    Returns
    -------
    int
        Exit status: 0 on success, 1 on usage errors, and 2 if there
        was nothing to convert
    """
    parser = get_parser()
    if len(argv) == 0:
        parser.print_help(sys.stdout)
        return EXIT_USAGE

    args = parser.parse_args(argv)
    log = NullWriter() if args.quiet else printer

    if args.es_to_hex is not None or args.hex_to_es is not None:
        if len(args.values) > 0:
            warn("Ignoring color values '%s' because an input file was given." % " ".join(args.values),
                 category=ArgumentWarning)

        if args.es_to_hex is not None:
            convert_file(args.es_to_hex,es_file_to_hex,log=log)
        else:
            convert_file(args.hex_to_es,hex_file_to_es,log=log)
        log.write("Done.")
        return EXIT_OK

    for value in args.values:
        if value.startswith("#"):
            sys.stdout.write(format_values(hex_to_fractions(value)))
            return EXIT_OK

    if len(args.values) >= 3:
        sys.stdout.write(values_to_hex(args.values))
        return EXIT_OK

    return EXIT_NOOP


if __name__ == "__main__":
    sys.exit(main())
