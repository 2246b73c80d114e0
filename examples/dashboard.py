#%%
import logging
import sys
from pathlib import Path

from dash import Dash, html

sys.path.insert(0, str(Path(__file__).parent.parent.resolve()))

from w3_layout import (
    ColumnSize,
    create_grid_container,
    create_panel,
    create_row,
    initialize,
    set_maximum_page_width_in_pixels,
)

logging.basicConfig(level=logging.DEBUG)

W3_CDN = "https://www.w3schools.com/w3css/4/w3.css"

# %%
app = Dash(__name__)
w3 = initialize(app, W3_CDN)
set_maximum_page_width_in_pixels(w3, w3.body, 1200)

create_panel(w3, w3.body, html.H1("Sales"), class_name="w3-teal")

row = create_row(w3, w3.body, padding=True)
for region in ["North", "South", "East"]:
    create_grid_container(
        w3, row, [html.H3(region), html.P("No data yet")], column_size=ColumnSize.THIRD
    )

details = create_row(w3, w3.body)
create_grid_container(w3, details, "Summary", column_size="s12 m8 l9")
create_grid_container(w3, details, "Filters", column_size="s12 m4 l3")

app.run(debug=True)
