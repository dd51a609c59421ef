DASHBOARD_TXT = """
## 📊 Dashboard – Local Fitness Tracker

Welcome to the **Local Fitness Tracker**.
This page is a quick guide to what the app does, how to use the UI, and where your data lives.

---

### 🧭 What this app does

- **A fixed 26-week workout program**
  Every date maps to a week and day of the program, counted from the program start date.
  Day 1 of each week falls on the same weekday as the start date.

- **Daily tracking**
  Steps, water (liters), calories and macros (protein / carbs / fat in grams), one record per date.

- **Weight log**
  One body-weight sample per date (kg). Saving twice on the same day replaces the earlier value.

- **Local, file-based storage**
  No cloud database: everything lives under `user_data/` in two JSON files.

---

### 🧑‍💻 How to use the UI

#### 1. Dashboard

- Shows **today's totals** and **today's workout**.
- **Save daily data** stores steps and water.
- **Save macros** stores calories, protein, carbs and fat.
  - The two buttons are independent: saving macros never resets your steps, and saving steps never resets your macros.
  - Blank or invalid numbers are saved as 0.
  - Macros are only saved if at least one value is entered.

#### 2. Schedule

- Shows the **current program week**, one row per day, with today marked.
- Pick a day to see the full exercise list.
- Before the start date or after the last week, the schedule shows
  *"Workout program completed or not started yet."*

#### 3. Trackers

- **Save weight** records today's weight. Zero, negative or blank weights are refused.
- The **weight log** lists all samples, newest first, with the change since your first entry.
- **Look up a program day** shows the daily record saved for any week/day of the program.

---

### 📂 Data layout on disk

```text
user_data/
  dailyData.json   # {"YYYY-MM-DD": {date, steps, water, calories, protein, carbs, fat}}
  weights.json     # {"YYYY-MM-DD": {date, weight}}
```

Configuration lives in `tracker_config.py` (environment variables `TRACKER_DATA_DIR`,
`PROGRAM_START_DATE`, `TOTAL_WEEKS`, `CURRICULUM_PATH`, `UI_TEST_MODE`, `LOG_LEVEL`).
"""
