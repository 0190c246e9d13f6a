"""Loading of the ordered metrics table from spreadsheet files."""
