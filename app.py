import argparse
import logging
import os
import sys
from functools import partial

import gradio as gr

_parser = argparse.ArgumentParser(add_help=False)
_parser.add_argument("--mode", type=str, default=None)
_parser.add_argument("--data-dir", type=str, default=None)
_parser.add_argument("--start-date", type=str, default=None)
_args, _unknown = _parser.parse_known_args(sys.argv[1:])
# tracker_config reads the environment on import
if _args.mode == "test":
    os.environ["UI_TEST_MODE"] = "true"
if _args.data_dir is not None:
    os.environ["TRACKER_DATA_DIR"] = _args.data_dir
if _args.start_date is not None:
    os.environ["PROGRAM_START_DATE"] = _args.start_date

from tracker_config import (
    CURRICULUM_PATH,
    LOG_LEVEL,
    PROGRAM_START_DATE,
    TOTAL_WEEKS,
    TRACKER_DATA_DIR,
    UI_TEST_MODE,
)
from curriculum import load_curriculum
from program_calendar import ProgramCalendar
from storage import JsonFileStore, MemoryStore
from logic.logic_daily import (
    DailyMetricsAggregator,
    load_dashboard_action,
    load_day_action,
    save_daily_action,
    save_macros_action,
)
from logic.logic_weights import WeightLog, load_weight_history_action, save_weight_action
from logic.logic_schedule import (
    load_schedule_action,
    load_schedule_day_action,
    load_today_workout_action,
)
from dash_board import DASHBOARD_TXT

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("app")

PAGES = ("dashboard", "schedule", "trackers", "help")


def build_services():
    """Create the store handle once and hand it to everything that needs it."""
    store = MemoryStore() if UI_TEST_MODE else JsonFileStore(TRACKER_DATA_DIR)
    store.open()
    calendar = ProgramCalendar(
        PROGRAM_START_DATE, load_curriculum(CURRICULUM_PATH), TOTAL_WEEKS
    )
    logger.info(
        "Program starts %s (%d weeks); storage: %s",
        PROGRAM_START_DATE, TOTAL_WEEKS, "memory" if UI_TEST_MODE else TRACKER_DATA_DIR,
    )
    return DailyMetricsAggregator(store), WeightLog(store), calendar


def switch_page(page_name: str):
    """Return visibility updates for all main pages based on the active page name."""
    return tuple(gr.update(visible=(page_name == p)) for p in PAGES)


aggregator, weight_log, calendar = build_services()


def dashboard_view():
    return load_dashboard_action(aggregator) + (load_today_workout_action(calendar),)


def weights_view():
    df, status = load_weight_history_action(weight_log)
    return df, status, df


with gr.Blocks(title="Fitness Tracker") as demo:
    with gr.Row():
        # Left navigation
        with gr.Column(scale=1, min_width=180):
            gr.Markdown("### Navigation")
            btn_dashboard = gr.Button("📊 Dashboard")
            btn_schedule = gr.Button("🗓️ Schedule")
            btn_trackers = gr.Button("⚖️ Trackers")
            btn_help = gr.Button("❓ Help")

        # Right content
        with gr.Column(scale=4):
            # Dashboard
            with gr.Column(visible=True) as page_dashboard:
                gr.Markdown("## 📊 Dashboard")
                daily_summary = gr.Markdown("")
                today_workout = gr.Markdown("")

                gr.Markdown("### Daily tracking")
                with gr.Row():
                    steps_input = gr.Number(label="Steps", precision=0, minimum=0)
                    water_input = gr.Number(label="Water (L)", minimum=0)
                save_daily_btn = gr.Button("Save daily data")

                gr.Markdown("### Nutrition")
                with gr.Row():
                    calorie_input = gr.Number(label="Calories", precision=0, minimum=0)
                    protein_input = gr.Number(label="Protein (g)", precision=0, minimum=0)
                    carb_input = gr.Number(label="Carbs (g)", precision=0, minimum=0)
                    fat_input = gr.Number(label="Fat (g)", precision=0, minimum=0)
                save_macros_btn = gr.Button("Save macros")
                dashboard_status = gr.Markdown("")

            # Schedule
            with gr.Column(visible=False) as page_schedule:
                gr.Markdown("## 🗓️ Weekly schedule")
                schedule_header = gr.Markdown("")
                schedule_table = gr.Dataframe(interactive=False, wrap=True)
                schedule_day = gr.Dropdown(
                    label="Show workout for day",
                    choices=[str(i) for i in range(1, 8)],
                )
                schedule_day_detail = gr.Markdown("")

            # Trackers
            with gr.Column(visible=False) as page_trackers:
                gr.Markdown("## ⚖️ Weight")
                weight_input = gr.Number(label="Weight today (kg)", minimum=0)
                save_weight_btn = gr.Button("Save weight")
                weight_status = gr.Markdown("")

                gr.Markdown("### Weight log")
                weight_trend = gr.Markdown("")
                weight_table = gr.Dataframe(interactive=False)
                weight_plot = gr.LinePlot(x="date", y="weight", title="Weight (kg)")

                gr.Markdown("### Look up a program day")
                with gr.Row():
                    lookup_week = gr.Dropdown(
                        label="Week number",
                        choices=[str(i) for i in range(1, TOTAL_WEEKS + 1)],
                        value="1",
                    )
                    lookup_day = gr.Dropdown(
                        label="Day number (1 = first day of week)",
                        choices=[str(i) for i in range(1, 8)],
                        value="1",
                    )
                lookup_btn = gr.Button("Load record")
                lookup_date = gr.Textbox(label="Absolute date", interactive=False)
                lookup_summary = gr.Markdown("")
                lookup_status = gr.Markdown("")

            # Help
            with gr.Column(visible=False) as page_help:
                gr.Markdown(DASHBOARD_TXT)

    pages = [page_dashboard, page_schedule, page_trackers, page_help]
    dashboard_outputs = [
        daily_summary,
        steps_input,
        water_input,
        calorie_input,
        protein_input,
        carb_input,
        fat_input,
        today_workout,
    ]

    # ====== Event bindings ======

    # Navigation
    btn_dashboard.click(
        lambda: switch_page("dashboard"), inputs=None, outputs=pages
    ).then(dashboard_view, inputs=None, outputs=dashboard_outputs)

    btn_schedule.click(
        lambda: switch_page("schedule"), inputs=None, outputs=pages
    ).then(
        partial(load_schedule_action, calendar),
        inputs=None,
        outputs=[schedule_header, schedule_table],
    )

    btn_trackers.click(
        lambda: switch_page("trackers"), inputs=None, outputs=pages
    ).then(weights_view, inputs=None, outputs=[weight_table, weight_trend, weight_plot])

    btn_help.click(lambda: switch_page("help"), inputs=None, outputs=pages)

    # Dashboard saves: refresh totals after each one
    save_daily_btn.click(
        partial(save_daily_action, aggregator),
        inputs=[steps_input, water_input],
        outputs=[dashboard_status],
    ).then(dashboard_view, inputs=None, outputs=dashboard_outputs)

    save_macros_btn.click(
        partial(save_macros_action, aggregator),
        inputs=[calorie_input, protein_input, carb_input, fat_input],
        outputs=[dashboard_status],
    ).then(dashboard_view, inputs=None, outputs=dashboard_outputs)

    # Schedule detail
    schedule_day.change(
        partial(load_schedule_day_action, calendar),
        inputs=[schedule_day],
        outputs=[schedule_day_detail],
    )

    # Trackers
    save_weight_btn.click(
        partial(save_weight_action, weight_log),
        inputs=[weight_input],
        outputs=[weight_status],
    ).then(weights_view, inputs=None, outputs=[weight_table, weight_trend, weight_plot])

    lookup_btn.click(
        partial(load_day_action, aggregator, calendar),
        inputs=[lookup_week, lookup_day],
        outputs=[lookup_date, lookup_summary, lookup_status],
    )

    demo.load(dashboard_view, inputs=None, outputs=dashboard_outputs)

if __name__ == "__main__":
    demo.launch()
