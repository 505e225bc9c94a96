# booktracker

A small tool that loads a book catalogue from a text file and asks which
field you want to search by.

## Installing

    pip install .

## The catalogue file

Each line describes one book as three comma-separated fields: an id, a title
and an author.

    1,Dune,Herbert
    2,Emma,Austen

A line needs exactly two commas and three non-empty fields; any other line is
reported as `Invalid line: ...` and skipped. The id is read leniently: only
its leading digits count, and an id without digits reads as 0. Title and
author are kept as written, surrounding spaces included. At most 1000 lines
are read.

## Running

    tracker books.txt

The prompt then offers:

- `0` to search by title
- `1` to search by author
- `exit` to quit

A valid choice is echoed back and the prompt is shown again. Any other answer
prints a warning and the prompt is shown again. End of input also quits.

Run `tracker` without a file argument (or with more than one) to see how it is
launched. If the file cannot be opened, the command exits without prompting.

## What it does not do

The command does not yet look anything up: choosing `0` or `1` records which
field to search by, but no search term is asked for and no books are listed.
To work with the loaded books, use the Python API below.

## Using it from Python

    from booktracker.catalog import load_catalog_file

    catalog, rejected = load_catalog_file("books.txt")
    for book in catalog:
        print(book.id, book.title, book.author)

`load_catalog_file` returns the `Catalog` together with the list of lines that
were rejected. `booktracker.catalog.parse_line` turns one line into a `Book`
and raises `InvalidLineError` for a malformed line; `load_catalog` reads from
any iterable of lines into an existing `Catalog`.

The package also holds the helpers the tool is built on:

- `booktracker.split`: splitting text at a separator or into words
- `booktracker.strings`: searching, comparing and size-limited copying
- `booktracker.convert`: lenient `atoi`, `atol`, `atodouble` and `itoa`
- `booktracker.chars`: ASCII character classes and case conversion
- `booktracker.memory`: byte-buffer operations
- `booktracker.linkedlist`: a singly linked `LinkedList`
- `booktracker.output`: writing characters, strings and numbers to a stream
- `booktracker.printf`: `sprintf` and `printf` with `%c %s %d %i %u %x %X %p %%`
- `booktracker.nextline`: `LineReader` and `get_next_line` for reading a line at a time

## Tests

    pip install .[test]
    pytest