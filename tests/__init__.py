"""Test suite for sqlstruct."""


def find_table(tables, raw_name):
    """Helper: find a parsed table by its SQL name."""
    for table in tables:
        if table.raw_name == raw_name:
            return table
    return None


def column_summary(table):
    """Helper: (field name, Go type) pairs in declaration order."""
    return [(c.name, c.type) for c in table.columns]
