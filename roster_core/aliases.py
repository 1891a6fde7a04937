# FILE: roster_core/aliases.py
ALIASES = {
    "team_id": ["team_id", "Team", "Team ID", "Team Number"],
    "roll_number": ["roll_number", "Roll Number", "Roll No", "roll_no", "Roll", "RollNo", "Number", "ID"],
    "name": ["name", "Name", "Full Name", "Student", "Participant"],
}


def map_headers(df):
    """
    Map input DataFrame columns to canonical names using aliases.
    Returns (renamed_df, mapping_report).
    """
    mapping = {}
    rename_cols = {}
    for col in df.columns:
        key = str(col).strip().lower()
        mapping[col] = None
        for canon, aliases in ALIASES.items():
            if key == canon or key in [alias.lower() for alias in aliases]:
                rename_cols[col] = canon
                mapping[col] = canon
                break
    df = df.rename(columns=rename_cols)
    return df, mapping
