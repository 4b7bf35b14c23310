from typing import List

import streamlit as st
from pydantic import ValidationError

# Configuration
from inventory_metrics.config import get_config
from inventory_metrics.logging import get_logger

# ProductSource interface + engine
from inventory_metrics.data.interface import ProductSourceError
from inventory_metrics.data.models import ALL_CATEGORIES, InventoryFilters, InventoryTab, NewStockEntry, Product
from inventory_metrics.data.util import get_product_source
from inventory_metrics.inventory.engine import InventoryMetricsEngine, stock_table, stock_table_css
from inventory_metrics.inventory.presentation import product_options

st.set_page_config(page_title="Inventory", layout="wide")

config = get_config()
logger = get_logger(__name__)
engine = InventoryMetricsEngine.from_config(config)
money = config.currency_symbol

# -----------------------------------------------------------------------------
# Product source (JSON or HTTP, per PRODUCT_SOURCE). Errors are shown to the
# user and the page carries on with an empty collection.
# -----------------------------------------------------------------------------
source = None
products: List[Product] = []
try:
    source = get_product_source()
    if st.sidebar.button("Refresh"):
        source.refresh()
        st.sidebar.success("Inventory data refreshed")
    products = source.list_products()
except (ProductSourceError, FileNotFoundError, ValueError) as e:
    logger.error(f"Could not load products: {e}")
    st.error(str(e))

# -----------------------------------------------------------------------------
# Filters
# -----------------------------------------------------------------------------
st.sidebar.header("Filters")

search_term = st.sidebar.text_input("Search products, categories, brands or HSN codes")

categories = source.list_product_categories().values if source is not None else []
cat_sel = st.sidebar.selectbox("Category", ["All Categories"] + categories)
category = ALL_CATEGORIES if cat_sel == "All Categories" else cat_sel

row_limit = st.sidebar.number_input(
    "Max table rows",
    min_value=config.min_row_limit,
    max_value=config.max_row_limit,
    value=config.default_row_limit,
    step=50,
)

tab_labels = {
    InventoryTab.ALL: "All Products",
    InventoryTab.LOW_STOCK: "Low Stock",
    InventoryTab.OUT_OF_STOCK: "Out of Stock",
    InventoryTab.BEST_SELLERS: "Best Sellers",
}

# Metrics are over the full collection, so tab badges can be computed first
metrics = engine.metrics(products)
tab_sel = st.radio(
    "View",
    list(tab_labels.keys()),
    format_func=lambda tab: (
        f"{tab_labels[tab]} ({metrics.low_stock})" if tab == InventoryTab.LOW_STOCK and metrics.low_stock
        else f"{tab_labels[tab]} ({metrics.out_of_stock})" if tab == InventoryTab.OUT_OF_STOCK and metrics.out_of_stock
        else tab_labels[tab]
    ),
    horizontal=True,
)

view = engine.evaluate(products, InventoryFilters(search_term=search_term, category=category, active_tab=tab_sel))

# -----------------------------------------------------------------------------
# KPIs
# -----------------------------------------------------------------------------
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Products", f"{view.metrics.total_items:,}")
c2.metric("In Stock", f"{view.metrics.in_stock:,}")
c3.metric("Low Stock", f"{view.metrics.low_stock:,}")
c4.metric("Out of Stock", f"{view.metrics.out_of_stock:,}")

v1, v2, v3 = st.columns(3)
v1.metric("Inventory Value", f"{money}{view.metrics.total_stock_value:,.2f}")
v2.metric("Sales Value", f"{money}{view.metrics.total_selling_value:,.2f}")
v3.metric(
    "Profit Margin",
    f"{view.metrics.margin_percentage:.1f}%",
    help=f"{money}{view.metrics.profit_margin:,.2f} potential profit",
)

# -----------------------------------------------------------------------------
# Product table
# -----------------------------------------------------------------------------
st.markdown(f"### {tab_labels[tab_sel]}")
if not view.rows:
    if search_term or category != ALL_CATEGORIES or tab_sel != InventoryTab.ALL:
        st.info("No products found. Try adjusting your search, filters, or tabs.")
    else:
        st.info("No products found. Add products to see them here.")
else:
    table = stock_table(view.rows).head(int(row_limit))
    st.dataframe(
        table.style.apply(stock_table_css, axis=None),
        use_container_width=True,
        column_config={
            "stock_percentage": st.column_config.ProgressColumn("Stock level", min_value=0, max_value=100, format="%.0f%%"),
            "stock_value": st.column_config.NumberColumn("Value", format=f"{money}%.2f"),
            "selling_value": st.column_config.NumberColumn("Selling value", format=f"{money}%.2f"),
        },
    )

# -----------------------------------------------------------------------------
# Stock alerts
# -----------------------------------------------------------------------------
if view.alerts.low_stock_message:
    st.warning(f"**Low Stock Alert**: {view.alerts.low_stock_message}")
if view.alerts.out_of_stock_message:
    st.error(f"**Out of Stock Alert**: {view.alerts.out_of_stock_message}")
if view.alerts.all_optimal:
    st.success("**All Stock Levels Are Optimal**: All products are sufficiently stocked.")

# -----------------------------------------------------------------------------
# Add stock
# -----------------------------------------------------------------------------
with st.expander("Add Stock"):
    with st.form("add_stock", clear_on_submit=True):
        product_labels = product_options(products)
        product_sel = st.selectbox("Product", list(product_labels.keys()), format_func=product_labels.get)
        quantity = st.number_input("Quantity", min_value=1, step=1)
        batch_number = st.text_input("Batch Number")
        f1, f2 = st.columns(2)
        cost_price = f1.number_input("Cost Price", min_value=0.0)
        selling_price = f2.number_input("Selling Price", min_value=0.0)
        supplier = st.text_input("Supplier")
        submitted = st.form_submit_button("Add Stock")

    if submitted and source is not None and product_sel:
        try:
            entry = NewStockEntry(
                product_id=product_sel,
                quantity=int(quantity),
                batch_number=batch_number,
                cost_price=cost_price,
                selling_price=selling_price,
                supplier=supplier or None,
            )
            source.add_stock(entry)
            st.success("Stock added successfully")
            st.rerun()
        except (ValidationError, ProductSourceError) as e:
            logger.error(f"Failed to add stock: {e}")
            st.error("Failed to add stock")

# -----------------------------------------------------------------------------
# Footer
# -----------------------------------------------------------------------------
with st.expander("Data source & thresholds"):
    st.write(
        {
            "product_source": config.product_source,
            "category_min_stock": dict(engine.thresholds.levels),
            "default_min_stock": engine.thresholds.default,
            "best_seller_value_threshold": config.best_seller_value_threshold,
        }
    )
