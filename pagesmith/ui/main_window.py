"""Main application window for the page generator."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PyQt6 import QtCore, QtGui, QtWidgets

from ..core.errors import PagesmithError
from ..core.models import SiteStructure
from ..session import Session
from ..settings import SettingsManager

APP_TITLE = "Pagesmith"


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, settings: Optional[SettingsManager] = None) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(1100, 720)

        self.settings = settings or SettingsManager()
        self.session = Session(template_name=self.settings.template_name)
        self._last_html: Optional[str] = None

        self._build_ui()
        self._build_menu()
        self._bind_events()
        self._refresh_project_panel(None)

    # ------------------------------------------------------------------ UI --
    def _build_ui(self) -> None:
        splitter = QtWidgets.QSplitter(self)
        splitter.setOrientation(QtCore.Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        # Project panel
        left_panel = QtWidgets.QWidget(self)
        left_layout = QtWidgets.QVBoxLayout(left_panel)
        left_layout.setContentsMargins(6, 6, 6, 6)
        left_layout.setSpacing(6)

        self.btn_open = QtWidgets.QPushButton("Open Folder…", left_panel)
        self.project_label = QtWidgets.QLabel(left_panel)
        self.categories_list = QtWidgets.QListWidget(left_panel)
        self.btn_add_category = QtWidgets.QPushButton("New Category", left_panel)

        left_layout.addWidget(self.btn_open)
        left_layout.addWidget(self.project_label)
        left_layout.addWidget(QtWidgets.QLabel("Categories", left_panel))
        left_layout.addWidget(self.categories_list, 1)
        left_layout.addWidget(self.btn_add_category)

        # Editor
        mid_panel = QtWidgets.QWidget(self)
        mid_layout = QtWidgets.QVBoxLayout(mid_panel)
        mid_layout.setContentsMargins(6, 6, 6, 6)
        mid_layout.setSpacing(6)

        self.title_edit = QtWidgets.QLineEdit(mid_panel)
        self.title_edit.setPlaceholderText("Page title")
        self.content_edit = QtWidgets.QPlainTextEdit(mid_panel)
        self.content_edit.setPlaceholderText("Write the page content here.")
        btn_row = QtWidgets.QHBoxLayout()
        self.btn_generate = QtWidgets.QPushButton("Generate Page", mid_panel)
        self.btn_save = QtWidgets.QPushButton("Save Page…", mid_panel)
        btn_row.addWidget(self.btn_generate)
        btn_row.addWidget(self.btn_save)

        mid_layout.addWidget(QtWidgets.QLabel("Title", mid_panel))
        mid_layout.addWidget(self.title_edit)
        mid_layout.addWidget(QtWidgets.QLabel("Content", mid_panel))
        mid_layout.addWidget(self.content_edit, 1)
        mid_layout.addLayout(btn_row)

        # Output
        right_tabs = QtWidgets.QTabWidget(self)
        right_tabs.setDocumentMode(True)
        self.preview = QtWidgets.QTextBrowser(right_tabs)
        self.source_view = QtWidgets.QPlainTextEdit(right_tabs)
        self.source_view.setReadOnly(True)
        right_tabs.addTab(self.preview, "Preview")
        right_tabs.addTab(self.source_view, "HTML")

        splitter.addWidget(left_panel)
        splitter.addWidget(mid_panel)
        splitter.addWidget(right_tabs)
        splitter.setSizes([240, 440, 420])

        self.status = self.statusBar()

    def _build_menu(self) -> None:
        bar = self.menuBar()
        if bar is None:
            bar = QtWidgets.QMenuBar(self)
            self.setMenuBar(bar)

        file_menu = bar.addMenu("&File")
        self.act_open = QtGui.QAction("Open Folder…", self)
        self.act_template = QtGui.QAction("Create Page Template", self)
        self.act_save = QtGui.QAction("Save Page…", self)
        self.act_quit = QtGui.QAction("Quit", self)
        if file_menu is not None:
            file_menu.addActions([self.act_open, self.act_template])
            file_menu.addSeparator()
            file_menu.addAction(self.act_save)
            file_menu.addSeparator()
            file_menu.addAction(self.act_quit)

        help_menu = bar.addMenu("&Help")
        self.act_about = QtGui.QAction("About", self)
        if help_menu is not None:
            help_menu.addAction(self.act_about)

    def _bind_events(self) -> None:
        self.btn_open.clicked.connect(self.open_folder_dialog)
        self.btn_add_category.clicked.connect(self.add_category)
        self.btn_generate.clicked.connect(self.generate_page)
        self.btn_save.clicked.connect(self.save_page)

        self.act_open.triggered.connect(self.open_folder_dialog)
        self.act_template.triggered.connect(self.create_template)
        self.act_save.triggered.connect(self.save_page)
        self.act_quit.triggered.connect(self.close)
        self.act_about.triggered.connect(self.show_about)

    # ------------------------------------------------------------- Project --
    def open_folder_dialog(self) -> None:
        start = self.settings.get("last_open_dir") or str(Path.home())
        path = QtWidgets.QFileDialog.getExistingDirectory(self, "Select a directory", start)
        if not path:
            return
        try:
            structure = self.session.scan(path)
        except PagesmithError as exc:
            QtWidgets.QMessageBox.critical(self, "Open failed", str(exc))
            return
        self.settings.set("last_open_dir", str(Path(path).parent))
        self._refresh_project_panel(structure)
        if self.status is not None:
            self.status.showMessage(f"Opened {structure.project_name}", 4000)
        if structure.missing_index:
            self._prompt_create_index()

    def _prompt_create_index(self) -> None:
        answer = QtWidgets.QMessageBox.question(
            self,
            "Create index.html?",
            "This folder has no index.html. Create one now?",
        )
        if answer != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        if self._run(self.session.create_index) is not None:
            self._refresh_project_panel(self.session.structure)

    def add_category(self) -> None:
        if self.session.structure is None:
            return
        name, ok = QtWidgets.QInputDialog.getText(self, "New Category", "Category name:")
        if not ok:
            return
        if self._run(self.session.create_category, name) is not None:
            self._refresh_project_panel(self.session.structure)

    def create_template(self) -> None:
        path = self._run(self.session.create_default_template)
        if path is not None and self.status is not None:
            self.status.showMessage(f"Created {path.name}", 4000)

    # ---------------------------------------------------------------- Page --
    def generate_page(self) -> None:
        html = self._run(self.session.render, self.title_edit.text(), self.content_edit.toPlainText())
        if html is None:
            return
        self._last_html = html
        self.preview.setHtml(html)
        self.source_view.setPlainText(html)
        if self.status is not None:
            self.status.showMessage(f"Generated HTML ({len(html)} chars)", 4000)

    def save_page(self) -> None:
        if self.session.structure is None:
            QtWidgets.QMessageBox.warning(self, APP_TITLE, "Open a project folder first.")
            return
        title = self.title_edit.text()
        start_dir = self.settings.get("last_save_dir") or str(self.session.structure.root_path)
        suggested = Path(start_dir) / self.session.suggested_output_path(title).name
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Save Page", str(suggested), "HTML (*.html)")
        if not path:
            return
        saved = self._run(self.session.generate_page, title, self.content_edit.toPlainText(), path)
        if saved is None:
            return
        self.settings.set("last_save_dir", str(saved.parent))
        if self.status is not None:
            self.status.showMessage(f"Saved {saved.name}", 4000)

    # ---------------------------------------------------------------- Misc --
    def _run(self, action, *args):
        try:
            return action(*args)
        except PagesmithError as exc:
            QtWidgets.QMessageBox.critical(self, APP_TITLE, str(exc))
            return None

    def _refresh_project_panel(self, structure: Optional[SiteStructure]) -> None:
        self.categories_list.clear()
        has_project = structure is not None
        self.btn_add_category.setEnabled(has_project)
        self.btn_generate.setEnabled(has_project)
        self.btn_save.setEnabled(has_project)
        self.act_template.setEnabled(has_project)
        self.act_save.setEnabled(has_project)
        if structure is None:
            self.project_label.setText("No project selected")
            self.setWindowTitle(APP_TITLE)
            return
        self.project_label.setText(structure.project_name)
        self.categories_list.addItems(list(structure.categories))
        self.setWindowTitle(f"{APP_TITLE} — {structure.project_name}")

    def show_about(self) -> None:
        QtWidgets.QMessageBox.information(
            self,
            "About",
            f"{APP_TITLE}\n\nScan a site folder and generate pages from its template.",
        )
