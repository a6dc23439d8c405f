"""
Web application for the Rocket Sled Simulation

Interactive dashboard replaying the built-in scenarios with force and speed charts.
"""

from typing import Any, Dict, List

import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate
import plotly.express as px
import plotly.graph_objs as go

from sled_simulation import SCENARIOS, SledParams, run_scenario_analysis


# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Rocket Sled Simulation"

# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Rocket Sled Simulation",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        html.Div([
            html.Div([
                html.Label("Scenarios:",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Dropdown(
                    id='scenario-input',
                    options=[{'label': name, 'value': name} for name in SCENARIOS],
                    value=list(SCENARIOS),
                    multi=True,
                ),
            ], style={'width': '30%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Duration (s):",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='duration-input',
                    type='number',
                    value=10.0,
                    min=1.0,
                    max=60.0,
                    step=0.5,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '12%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Thrust (N):",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='thrust-input',
                    type='number',
                    value=2000.0,
                    min=0.0,
                    max=5000.0,
                    step=100.0,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '12%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Friction Coefficient:",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='friction-input',
                    type='number',
                    value=0.15,
                    min=0.0,
                    max=1.0,
                    step=0.01,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '12%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Button('Run Simulation', id='run-button',
                       style={'width': '20%', 'padding': '10px', 'fontSize': '16px',
                              'backgroundColor': '#4CAF50', 'color': 'white',
                              'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'})
        ], style={'marginBottom': '30px', 'padding': '20px', 'backgroundColor': '#f5f5f5',
                  'borderRadius': '10px'}),

        html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),

        dcc.Loading(
            id="loading",
            type="default",
            children=[
                html.Div(id='results-container')
            ]
        )
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


@app.callback(
    [Output("results-container", "children"), Output("status-message", "children")],
    [Input("run-button", "n_clicks")],
    [
        State("scenario-input", "value"),
        State("duration-input", "value"),
        State("thrust-input", "value"),
        State("friction-input", "value"),
    ],
)
def update_results(
    n_clicks: int | None,
    names: List[str],
    duration: float,
    thrust: float,
    friction_coefficient: float,
) -> tuple[Any, Any]:
    """Run simulation and update results"""
    if n_clicks is None:
        raise PreventUpdate

    try:
        if not names:
            return [], html.Div(
                "Error: Select at least one scenario.",
                style={"color": "red"},
            )

        if duration is None or duration <= 0 or duration > 60:
            return [], html.Div(
                "Error: Duration must be between 1 and 60 seconds.",
                style={"color": "red"},
            )

        params = SledParams(
            base_thrust=thrust if thrust is not None else 2000.0,
            friction_coefficient=friction_coefficient if friction_coefficient is not None else 0.15,
        )
        results = run_scenario_analysis(names, duration=duration, params=params)

        status_msg = html.Div(
            f"Simulation complete! Ran {len(names)} scenarios.",
            style={"color": "green"},
        )

        return create_results_layout(results, names, params), status_msg

    except (ValueError, KeyError) as e:
        return [], html.Div(f"Error: {e}", style={"color": "red"})


def create_speed_gauge(speed: float, params: SledParams, title: str) -> go.Figure:
    """Speedometer with the alarm band shaded red"""
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=speed,
            number={"suffix": " m/s", "valueformat": ".1f"},
            title={"text": title},
            gauge={
                "axis": {"range": [0, params.max_velocity]},
                "bar": {"color": "red" if speed > params.alarm_velocity else "#4CAF50"},
                "steps": [
                    {"range": [params.alarm_velocity, params.max_velocity], "color": "#f8d7da"},
                ],
            },
        )
    )
    fig.update_layout(height=250, margin=dict(l=20, r=20, t=50, b=20))
    return fig


def create_results_layout(
    results: Dict[str, Dict[str, Any]], names: List[str], params: SledParams
) -> html.Div:
    """Create the results visualization layout"""
    colors = px.colors.qualitative.Set1

    # 1. Position over time
    fig1 = go.Figure()
    for i, name in enumerate(names):
        t = results[name]["time"]
        x = results[name]["state"][:, 0]
        fig1.add_trace(
            go.Scatter(
                x=t,
                y=x,
                mode="lines",
                name=name,
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"{name}<br>Time: %{{x:.2f}}s<br>Position: %{{y:.2f}}m<extra></extra>",
            )
        )

    fig1.update_layout(
        title="Position Over Time",
        xaxis_title="Time (s)",
        yaxis_title="Position (m)",
        hovermode="closest",
        height=400,
        template="plotly_white",
    )

    # 2. Velocity over time, with the red zone marked
    fig2 = go.Figure()
    for i, name in enumerate(names):
        t = results[name]["time"]
        v = results[name]["state"][:, 1]
        fig2.add_trace(
            go.Scatter(
                x=t,
                y=v,
                mode="lines",
                name=name,
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"{name}<br>Time: %{{x:.2f}}s<br>Velocity: %{{y:.2f}}m/s<extra></extra>",
            )
        )
    for bound in (params.alarm_velocity, -params.alarm_velocity):
        fig2.add_hline(y=bound, line_dash="dash", line_color="red")

    fig2.update_layout(
        title="Velocity Over Time",
        xaxis_title="Time (s)",
        yaxis_title="Velocity (m/s)",
        hovermode="closest",
        height=400,
        template="plotly_white",
    )

    # 3. Force breakdown for each scenario
    force_figs = []
    force_labels = ["Applied", "Friction", "Air drag", "Net"]
    for name in names:
        t = results[name]["time"]
        forces = results[name]["forces"]
        fig = go.Figure()
        for j, label in enumerate(force_labels):
            fig.add_trace(
                go.Scatter(
                    x=t,
                    y=forces[:, j],
                    mode="lines",
                    name=label,
                    line=dict(color=colors[j % len(colors)], width=2),
                )
            )
        fig.update_layout(
            title=f"Forces: {name}",
            xaxis_title="Time (s)",
            yaxis_title="Force (N)",
            height=350,
            template="plotly_white",
        )
        force_figs.append(fig)

    # Summary table
    table_rows = [
        html.Tr([
            html.Th("Scenario"),
            html.Th("Max Speed (m/s)"),
            html.Th("Final Position (m)"),
            html.Th("Distance (m)"),
            html.Th("Thrust Work (kJ)"),
            html.Th("Losses (kJ)"),
            html.Th("Red Zone (s)"),
        ])
    ]

    for name in names:
        analysis = results[name]["analysis"]
        losses = -(analysis["friction_work"] + analysis["drag_work"]) / 1000
        red_color = "red" if analysis["time_in_red_zone"] > 0 else "green"
        table_rows.append(
            html.Tr([
                html.Td(name),
                html.Td(f"{analysis['max_speed']:.2f}"),
                html.Td(f"{analysis['final_position']:.2f}"),
                html.Td(f"{analysis['distance_travelled']:.2f}"),
                html.Td(f"{analysis['thrust_work']/1000:.2f}"),
                html.Td(f"{losses:.2f}"),
                html.Td(
                    f"{analysis['time_in_red_zone']:.2f}",
                    style={"color": red_color, "fontWeight": "bold"},
                ),
            ])
        )

    gauges = [
        html.Div(
            [dcc.Graph(figure=create_speed_gauge(results[name]["analysis"]["max_speed"], params, name))],
            style={"width": "32%", "display": "inline-block", "marginRight": "1%"},
        )
        for name in names
    ]

    return html.Div([
        html.H2("Simulation Results", style={"marginTop": "30px", "marginBottom": "20px"}),
        html.Div([
            html.H3("Summary Table", style={"marginBottom": "15px"}),
            html.Table(
                table_rows,
                style={
                    "width": "100%",
                    "borderCollapse": "collapse",
                    "marginBottom": "30px",
                    "fontSize": "14px",
                },
            ),
        ], style={"marginBottom": "30px"}),
        html.Div([
            html.H3("Peak Speed", style={"marginBottom": "15px"}),
            html.Div(gauges),
        ], style={"marginBottom": "30px"}),
        html.Div([
            html.Div([dcc.Graph(figure=fig1)], style={"marginBottom": "30px"}),
            html.Div([dcc.Graph(figure=fig2)], style={"marginBottom": "30px"}),
            html.Div(
                [html.Div([dcc.Graph(figure=fig)], style={"marginBottom": "30px"}) for fig in force_figs]
            ),
        ]),
    ])


if __name__ == "__main__":
    app.run(debug=True, port=8050)
