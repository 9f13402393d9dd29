"""
Generate a sample CSV file and rules for testing and demos.

Creates a realistic client list with intentional data quality issues
to demonstrate the analyzer.
"""

import random
from datetime import datetime
from pathlib import Path


RULES_YAML = """\
settings:
  auto_fix: false
  date_dayfirst: false

rules:
  - column: client_id
    type: numeric
    required: true
    min: 1
  - column: email
    type: text
    required: true
  - column: date_of_birth
    type: date
    required: true
    min: 1900-01-01
    max: 2010-12-31
  - column: hours
    type: numeric
    min: 0
    max: 24
"""


def create_sample_csv(csv_path: str = "sample_data/clients.csv",
                      rules_path: str = "sample_data/rules.yaml",
                      seed: int | None = 42) -> None:
    """Create sample CSV and matching rules file."""
    rng = random.Random(seed)

    path = Path(csv_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    first_names = ['John', 'Jane', 'Michael', 'Sarah', 'David', 'Emily', 'Robert', 'Lisa', 'James', 'Maria']
    last_names = ['Smith', 'Johnson', 'Williams', 'Brown', 'Jones', 'Garcia', 'Miller', 'Davis', 'Wilson', 'Taylor']

    lines = ['client_id;first_name;last_name;email;date_of_birth;hours;status']

    for i in range(1, 201):
        first_name = rng.choice(first_names)
        last_name = rng.choice(last_names)

        # Intentional issues:
        # - Some missing emails (required)
        # - Some invalid dates (type) and birthdays out of range (range)
        # - Some hours outside 0..24, some with a comma decimal separator
        # - Some padded names (autofix)

        email = f"{first_name.lower()}.{last_name.lower()}{i}@email.com" if rng.random() > 0.15 else ""

        if rng.random() > 0.05:
            dob = datetime(
                rng.randint(1950, 2005),
                rng.randint(1, 12),
                rng.randint(1, 28)
            ).strftime('%Y-%m-%d')
        else:
            dob = rng.choice(['unknown', '31.02.1980', '1850-06-01'])

        if rng.random() > 0.03:
            hours = f"{rng.uniform(0.5, 8):.1f}"
            if rng.random() > 0.7:
                hours = hours.replace('.', ',')
        else:
            hours = rng.choice(['-1', '25', 'n/a'])

        if rng.random() > 0.9:
            first_name = f"  {first_name} "

        status = rng.choice(['active', 'active', 'active', 'inactive', 'pending'])

        lines.append(';'.join([str(i), first_name, last_name, email, dob, hours, status]))

    # Exact duplicates of an earlier line, plus blank and short lines
    lines.append(lines[1])
    lines.append(lines[2])
    lines.append('')
    lines.append('203;Anna')

    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    Path(rules_path).write_text(RULES_YAML, encoding='utf-8')

    print(f"Sample CSV created: {csv_path}")
    print(f"  - 203 data rows (with required, type, range and duplicate issues)")
    print(f"  - 1 blank line (skipped on load)")
    print(f"Rules created: {rules_path}")


if __name__ == '__main__':
    create_sample_csv()
