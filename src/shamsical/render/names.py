SOLAR_HIJRI_MONTHS = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)

GREGORIAN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# column headers, Saturday-first and Sunday-first
SOLAR_HIJRI_WEEKDAY_ABBR = ("Sh", "Ye", "Do", "Se", "Ch", "Pa", "Jo")
GREGORIAN_WEEKDAY_ABBR = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")
