#!/usr/bin/env python3
# app.py - Poker Brain (GUI) with:
# - one-click answers, "Show Answer" for peeking without guessing
# - reset with confirmation once the learner has moved past question 1
# - pass threshold (default 70%) gates the certificate
# - poker terms glossary tab
# Requires: reportlab

import argparse
import logging
import os
import random
from datetime import datetime
import tkinter as tk
from tkinter import ttk, messagebox, filedialog, simpledialog

from certificate import generate_certificate
from errors import QuizError
from export import write_results_csv
from question_bank import DEFAULT_BANK_PATH, load_bank
from quiz_engine import DEFAULT_QUESTION_COUNT, QuizEngine
from resources import glossary_text

logger = logging.getLogger(__name__)

APP_TITLE = "Poker Brain - Poker Math Quiz"
PASS_THRESHOLD_DEFAULT = 0.70  # 70%

RED = "#b3261e"
BLACK = "#1b1b1b"


class TrainerApp(ttk.Frame):
    def __init__(self, master, engine: QuizEngine, pass_threshold: float = PASS_THRESHOLD_DEFAULT):
        super().__init__(master)
        self.pack(fill="both", expand=True)
        self.engine = engine
        self.pass_threshold = pass_threshold
        self.user_name = ""
        self.option_buttons = []

        ttk.Label(self, text=APP_TITLE, font=("Segoe UI", 16, "bold")).pack(anchor="w", padx=10, pady=(10,6))

        self.nb = ttk.Notebook(self); self.nb.pack(fill="both", expand=True, padx=6, pady=6)

        # --- Quiz tab
        self.tab_quiz = ttk.Frame(self.nb); self.nb.add(self.tab_quiz, text="Quiz")

        toolbar = ttk.Frame(self.tab_quiz); toolbar.pack(fill="x", padx=6, pady=(6,2))
        ttk.Button(toolbar, text="Load Question Bank…", command=self.load_questions).pack(side="left", padx=4)
        ttk.Button(toolbar, text="Reset Quiz", command=self.reset_quiz).pack(side="left", padx=4)
        self.btn_cert = ttk.Button(toolbar, text="Generate Certificate", command=self.generate_cert, state="disabled")
        self.btn_cert.pack(side="left", padx=4)
        ttk.Button(toolbar, text="Save Results CSV", command=self.save_results_csv).pack(side="left", padx=4)
        self.score_var = tk.StringVar()
        ttk.Label(toolbar, textvariable=self.score_var, font=("Segoe UI", 11, "bold")).pack(side="right", padx=8)

        self.progress = ttk.Progressbar(self.tab_quiz, mode="determinate"); self.progress.pack(fill="x", padx=8, pady=4)
        self.status = tk.StringVar(); ttk.Label(self.tab_quiz, textvariable=self.status).pack(anchor="w", padx=8)

        self.q_text = tk.Text(self.tab_quiz, height=7, wrap="word", state="disabled", font=("Segoe UI", 11))
        self.q_text.tag_configure("red", foreground=RED, font=("Segoe UI", 16, "bold"))
        self.q_text.tag_configure("black", foreground=BLACK, font=("Segoe UI", 16, "bold"))
        self.q_text.tag_configure("label", foreground="#666")
        self.q_text.pack(fill="both", expand=False, padx=8, pady=6)

        self.choices_frame = ttk.Frame(self.tab_quiz); self.choices_frame.pack(fill="x", padx=8, pady=(0,8))

        nav = ttk.Frame(self.tab_quiz); nav.pack(fill="x", padx=8, pady=6)
        self.btn_reveal = ttk.Button(nav, text="Show Answer", command=self.reveal_answer)
        self.btn_reveal.pack(side="left", padx=4)
        self.btn_next = ttk.Button(nav, text="Next Question", command=self.next_question)
        self.btn_next.pack(side="left", padx=4)
        ttk.Button(nav, text="Take Another Quiz", command=self.restart_quiz).pack(side="right", padx=4)

        self.feedback = tk.Text(self.tab_quiz, height=9, wrap="word", state="disabled", bg="#f9fff6")
        self.feedback.tag_configure("good", foreground="#1b7f3b", font=("Segoe UI", 11, "bold"))
        self.feedback.tag_configure("learn", foreground="#9a6b00", font=("Segoe UI", 11, "bold"))
        self.feedback.pack(fill="both", expand=True, padx=8, pady=(0,8))

        # --- Glossary tab
        self.tab_terms = ttk.Frame(self.nb); self.nb.add(self.tab_terms, text="Poker Terms Guide")
        ttk.Label(self.tab_terms, text="Poker Terms Guide", font=("Segoe UI", 13, "bold")).pack(anchor="w", padx=10, pady=(10,6))
        terms_box = tk.Text(self.tab_terms, height=18, wrap="word")
        terms_box.pack(fill="both", expand=True, padx=10, pady=(0,10))
        terms_box.insert("1.0", glossary_text()); terms_box.config(state="disabled")

        self.render()

    # ---------------- Quiz flow ----------------
    def load_questions(self):
        path = filedialog.askopenfilename(filetypes=[("JSON", "*.json")])
        if not path: return
        try:
            bank = load_bank(path)
            self.engine = QuizEngine(bank, self.engine.count, self.engine.rng)
        except (OSError, ValueError) as e:
            logger.error("could not load %s: %s", path, e)
            messagebox.showerror("Load error", str(e)); return
        self.render()
        self.status.set(f"Loaded {len(bank)} questions from {os.path.basename(path)}.")

    def render(self):
        s = self.engine.session
        self.progress["maximum"] = s.total
        self.btn_cert.config(state="disabled")
        if s.is_complete:
            self.finish_quiz(); return
        q = s.current
        self.score_var.set(f"Score: {s.score}/{s.answered_count}")
        self.progress["value"] = s.position + 1
        self.status.set(f"Question {s.position + 1} of {s.total}")

        self.q_text.config(state="normal"); self.q_text.delete("1.0", "end")
        self.q_text.insert("end", q.scenario + "\n\n")
        if q.board:
            self.q_text.insert("end", "Board:  ", "label"); self._insert_cards(q.board)
        self.q_text.insert("end", "Your hand:  ", "label"); self._insert_cards(q.hero_cards)
        self.q_text.config(state="disabled")

        for w in self.choices_frame.winfo_children(): w.destroy()
        self.option_buttons = []
        for i, option in enumerate(q.options):
            b = ttk.Button(self.choices_frame, text=f"{chr(65 + i)}. {option}",
                           command=lambda i=i: self.submit_answer(i))
            b.grid(row=i // 2, column=i % 2, sticky="ew", padx=4, pady=3)
            self.option_buttons.append(b)
        self.choices_frame.columnconfigure(0, weight=1); self.choices_frame.columnconfigure(1, weight=1)

        self.show_feedback()

    def _insert_cards(self, cards):
        for card in cards:
            self.q_text.insert("end", f"{card} ", "red" if card.is_red else "black")
        self.q_text.insert("end", "\n")

    def show_feedback(self):
        s = self.engine.session
        revealed = s.is_revealed
        for b in self.option_buttons:
            b.config(state=("disabled" if revealed else "normal"))
        self.btn_reveal.config(state=("disabled" if revealed else "normal"))
        self.btn_next.config(state=("normal" if revealed else "disabled"),
                             text=("Finish Quiz" if s.position == s.total - 1 else "Next Question"))
        self.score_var.set(f"Score: {s.score}/{s.answered_count}")
        self.feedback.config(state="normal"); self.feedback.delete("1.0", "end")
        if revealed:
            q = s.current
            if s.is_correct:
                self.feedback.insert("end", "✅ Correct!\n", "good")
            else:
                self.feedback.insert("end", "Learning Opportunity\n", "learn")
                if s.selected is not None:
                    self.feedback.insert("end", f"You chose: {q.options[s.selected]}\n")
                self.feedback.insert("end", f"Correct answer: {chr(65 + q.correct)}. {q.correct_option}\n")
            self.feedback.insert("end", "\n" + (s.rationale or ""))
        self.feedback.config(state="disabled")

    def _attempt(self, action, *args):
        try:
            action(*args)
        except QuizError as e:
            messagebox.showinfo("Not available", str(e))
            return False
        return True

    def submit_answer(self, index):
        if self._attempt(self.engine.submit_answer, index):
            self.show_feedback()

    def reveal_answer(self):
        if self._attempt(self.engine.reveal_without_answering):
            self.show_feedback()

    def next_question(self):
        if self._attempt(self.engine.advance):
            self.render()

    def finish_quiz(self):
        s = self.engine.session
        result = s.result()
        passed = result.percentage / 100.0 >= self.pass_threshold
        self.btn_cert.config(state=("normal" if passed else "disabled"))
        self.progress["value"] = s.total
        self.score_var.set(f"Score: {result.final_score}/{result.total}")

        status_line = f"Quiz Complete! {result.final_score}/{result.total} ({result.percentage}%). "
        if passed:
            status_line += "✅ PASSED."
        else:
            status_line += f"Certificate needs ≥ {int(self.pass_threshold*100)}%."
        self.status.set(status_line)

        self.q_text.config(state="normal"); self.q_text.delete("1.0", "end")
        self.q_text.insert("1.0", result.message); self.q_text.config(state="disabled")
        for w in self.choices_frame.winfo_children(): w.destroy()
        self.option_buttons = []
        self.btn_reveal.config(state="disabled"); self.btn_next.config(state="disabled")
        self.feedback.config(state="normal"); self.feedback.delete("1.0", "end")
        self.feedback.insert("1.0", s.summary()); self.feedback.config(state="disabled")

    def reset_quiz(self):
        s = self.engine.session
        if s.position > 0 and not s.is_complete:
            if not messagebox.askyesno("Reset quiz", "Are you sure you want to reset? Your current progress will be lost."):
                return
        self.restart_quiz()

    def restart_quiz(self):
        self.engine.restart()
        self.render()

    # ---------------- Certificate & CSV ----------------
    def generate_cert(self):
        s = self.engine.session
        if not s.is_complete:
            messagebox.showwarning("No results", "Finish the quiz first."); return
        result = s.result()
        if result.percentage / 100.0 < self.pass_threshold:
            messagebox.showwarning("Threshold not met",
                                   f"Minimum {int(self.pass_threshold*100)}% required. Take another quiz.")
            return
        if not self.user_name:
            self.user_name = simpledialog.askstring("Your name", "Enter your name (for the certificate):") or ""
        path = filedialog.asksaveasfilename(defaultextension=".pdf", filetypes=[("PDF","*.pdf")],
                                            initialfile=f"certificate_{self.user_name.replace(' ','_') or 'poker_brain'}.pdf")
        if not path: return
        generate_certificate(self.user_name, result, datetime.now(), path, session=s)
        messagebox.showinfo("Certificate", f"Saved: {path}")

    def save_results_csv(self):
        s = self.engine.session
        if not s.history:
            messagebox.showwarning("No results", "Answer at least one question first."); return
        path = filedialog.asksaveasfilename(defaultextension=".csv", filetypes=[("CSV","*.csv")],
                                            initialfile="quiz_results.csv")
        if not path: return
        write_results_csv(path, s, self.user_name)
        messagebox.showinfo("Saved", f"Results saved to {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="poker-brain", description="Multiple-choice poker math quiz")
    parser.add_argument("--bank", default=DEFAULT_BANK_PATH, help="question bank JSON file")
    parser.add_argument("--count", type=int, default=DEFAULT_QUESTION_COUNT, help="questions per quiz")
    parser.add_argument("--seed", type=int, default=None, help="seed for repeatable question order")
    parser.add_argument("--pass-threshold", type=float, default=PASS_THRESHOLD_DEFAULT * 100,
                        help="percentage needed for a certificate")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        engine = QuizEngine(load_bank(args.bank), args.count, rng)
    except (OSError, ValueError) as e:
        parser.error(str(e))
    threshold = max(0.0, min(1.0, args.pass_threshold / 100.0))

    root = tk.Tk()
    root.title(APP_TITLE)
    TrainerApp(root, engine, threshold)
    root.minsize(900, 680)
    root.mainloop()


if __name__ == "__main__":
    main()
