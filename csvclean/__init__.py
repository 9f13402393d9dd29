"""
CSV Data Cleaner - rule-based quality checks for delimited text tables.

Loads a ',' or ';' separated file, checks it against per-column rules,
trims whitespace on request and scores the result from 0 to 100.

Basic usage:
    from csvclean.loader import load
    from csvclean.rule_engine import TableValidator
    from csvclean.validators import ColumnRule, RuleKind
    from csvclean.reporters import print_report

    # Load the table
    table = load('data/customers.csv')

    # Declare rules
    rules = [ColumnRule('Age', RuleKind.NUMERIC, is_required=True, min_value='0')]

    # Analyze
    validator = TableValidator()
    issues = validator.analyze(table, rules)
    score = validator.calculate_quality_score(table, issues)

    # Or fix, analyze and display in one go
    print_report(validator.run(table, rules, auto_fix=True))
"""

__version__ = '1.0.0'
