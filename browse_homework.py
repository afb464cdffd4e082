import logging
import os
import sys
from datetime import date, timedelta

# Add the src directory to the Python path
src_path = os.path.join(os.path.dirname(__file__), "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from classcharts import (
    ClassCharts,
    DisplayDate,
    Homeworks,
    Lessons,
    PathCredentials,
)
from classcharts.logger import setup_logger

# Optional: Enable detailed logging
setup_logger(logging.DEBUG)

# Load credentials from credentials.yml (or specified path)
creds = PathCredentials()
# creds = PathCredentials("path/to/your/credentials.yml")

# Log in and learn the student id
client = ClassCharts.start(creds)

print("Fetching homework due in the next two weeks...")
homeworks = Homeworks(
    client,
    from_date=date.today(),
    to_date=date.today() + timedelta(days=14),
    display_date=DisplayDate.DUE_DATE,
)
for homework in homeworks:
    ticked = "x" if homework.status.ticked else " "
    print(f"[{ticked}] {homework.due_date} {homework.subject}: {homework.title}")

print("\nToday's timetable:")
for lesson in Lessons(client, date.today()):
    print(f"- {lesson.period_number} {lesson.subject_name} ({lesson.room_name})")

print("\nDone.")
