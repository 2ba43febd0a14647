"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the chart library (pyqtgraph).
It deals with parameters, curve scaling, render requests and I/O.
"""
